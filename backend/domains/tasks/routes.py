"""Task domain API handlers - thin routing layer.

The handlers are bound to paths in :mod:`backend.routes`.
"""

import logging
from typing import List

from fastapi import Depends, HTTPException, Path
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from backend.config.dependencies import get_db
from .exceptions import TaskNotFoundException
from .schemas import Task as TaskSchema, TaskCreate, TaskNotFound, TaskUpdate
from .service import TaskService

logger = logging.getLogger(__name__)


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    """Dependency to get task service."""
    return TaskService(db)


def _not_found(e: TaskNotFoundException) -> JSONResponse:
    return JSONResponse(status_code=404, content=TaskNotFound(msg=e.detail).model_dump())


async def get_tasks(
    service: TaskService = Depends(get_task_service)
) -> List[TaskSchema]:
    """Return every stored task."""
    return service.list_tasks()


async def count_tasks(
    service: TaskService = Depends(get_task_service)
) -> int:
    """Return the total number of tasks."""
    return service.count_tasks()


async def create_task(
    task_data: TaskCreate,
    service: TaskService = Depends(get_task_service)
) -> TaskSchema:
    """Create a new task with a generated id."""
    try:
        return service.create_task(task_data)
    except Exception as e:
        logger.exception("Failed to create task")
        raise HTTPException(status_code=500, detail=str(e))


async def get_task(
    id: str = Path(..., description="the task id"),
    service: TaskService = Depends(get_task_service)
):
    """Get a task by id."""
    try:
        return service.get_task(id)
    except TaskNotFoundException as e:
        return _not_found(e)


async def delete_task(
    id: str = Path(..., description="the task id"),
    service: TaskService = Depends(get_task_service)
):
    """Delete a task by id and return it."""
    try:
        return service.delete_task(id)
    except TaskNotFoundException as e:
        return _not_found(e)


async def update_task(
    task_data: TaskUpdate,
    id: str = Path(..., description="the task id"),
    service: TaskService = Depends(get_task_service)
):
    """Replace a task's name and description."""
    try:
        return service.update_task(id, task_data)
    except TaskNotFoundException as e:
        return _not_found(e)
