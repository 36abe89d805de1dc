TASK_NOT_FOUND_MESSAGE = "task was not found"


class TaskException(Exception):
    """Base exception for the tasks domain."""
    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class TaskNotFoundException(TaskException):
    """Raised when no task has the requested id."""
    def __init__(self, task_id: str, detail: str = TASK_NOT_FOUND_MESSAGE):
        super().__init__(detail)
        self.task_id = task_id
