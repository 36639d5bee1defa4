from enum import Enum


class TaskStatus(Enum):
    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class TaskPriority(Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


DEFAULT_ASSIGNEE = "Unassigned"
