# Application Messages
class AppMessages:
    TASK_DELETED = "Task deleted"
    UPDATE_DELETED = "Update deleted"
    ALL_DATA_CLEARED = "All data cleared"


# API error messages
class ApiErrors:
    SERVER_ERROR = "Server error"
    VALIDATION_ERROR = "Validation Error"
    RESOURCE_NOT_FOUND_TITLE = "Resource not found"
    TASK_NOT_FOUND = "Task not found"
    UPDATE_NOT_FOUND = "Update not found"


# Validation error messages
class ValidationErrors:
    TEAM_NAME_REQUIRED = "Team name is required"
    TASK_FIELDS_REQUIRED = "Team name and task title are required"
    UPDATE_FIELDS_REQUIRED = "Team name and update text are required"
    INVALID_MEMBER_COUNT = "Member count must be a non-negative integer"
