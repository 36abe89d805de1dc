"""Service layer for task management."""

import logging
from contextlib import contextmanager
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .exceptions import TaskNotFoundException
from .models import Task
from .repository import SqlAlchemyTaskRepository
from .schemas import Task as TaskSchema, TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


class TaskService:
    """Service for managing tasks.

    Every write runs in its own transaction. Results are returned as
    :class:`TaskSchema` snapshots so they stay valid after the session
    expires or deletes the underlying rows.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = SqlAlchemyTaskRepository(db)

    def list_tasks(self) -> List[TaskSchema]:
        return [TaskSchema.model_validate(task) for task in self.repo.list_all()]

    def count_tasks(self) -> int:
        return self.repo.count()

    def get_task(self, task_id: str) -> TaskSchema:
        return TaskSchema.model_validate(self._get_or_raise(task_id))

    def create_task(self, task_data: TaskCreate) -> TaskSchema:
        task = Task(name=task_data.name, description=task_data.description)
        with self._transaction():
            self.repo.add(task)
        self.db.refresh(task)
        logger.info("Created task %s", task.id)
        return TaskSchema.model_validate(task)

    def update_task(self, task_id: str, task_data: TaskUpdate) -> TaskSchema:
        task = self._get_or_raise(task_id)
        task.name = task_data.name
        task.description = task_data.description
        with self._transaction():
            task = self.repo.update(task)
        self.db.refresh(task)
        logger.info("Updated task %s", task_id)
        return TaskSchema.model_validate(task)

    def delete_task(self, task_id: str) -> TaskSchema:
        """Delete a task and return its state from before the deletion."""
        task = self._get_or_raise(task_id)
        snapshot = TaskSchema.model_validate(task)
        with self._transaction():
            self.repo.delete(task_id)
        logger.info("Deleted task %s", task_id)
        return snapshot

    def _get_or_raise(self, task_id: str) -> Task:
        task = self.repo.get(task_id)
        if task is None:
            raise TaskNotFoundException(task_id)
        return task

    @contextmanager
    def _transaction(self):
        """Commit the writes made inside the block; roll back on database errors."""
        try:
            yield
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Task transaction failed; rolled back")
            raise
