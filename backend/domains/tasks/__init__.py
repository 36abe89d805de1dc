"""Tasks domain module for the Task resource."""

from .models import Task
from .schemas import Task as TaskSchema, TaskCreate, TaskUpdate, TaskNotFound
from .exceptions import TaskException, TaskNotFoundException, TASK_NOT_FOUND_MESSAGE
from .service import TaskService
from .repository import TaskRepository, SqlAlchemyTaskRepository

__all__ = [
    "Task",
    "TaskSchema",
    "TaskCreate",
    "TaskUpdate",
    "TaskNotFound",
    "TaskException",
    "TaskNotFoundException",
    "TASK_NOT_FOUND_MESSAGE",
    "TaskService",
    "TaskRepository",
    "SqlAlchemyTaskRepository",
]
