from collab.constants.messages import ApiErrors


class TaskNotFoundException(Exception):
    def __init__(self, task_id: str | None = None, message: str = ApiErrors.TASK_NOT_FOUND):
        self.task_id = task_id
        self.message = message
        super().__init__(self.message)
