"""Repository for task data access."""

from typing import Protocol, Optional, List
from sqlalchemy.orm import Session

from backend.domains.shared.repository import SqlAlchemyRepository
from .models import Task


class TaskRepository(Protocol):
    """Protocol for Task repository operations."""

    def get(self, id: str) -> Optional[Task]:
        """Get a task by ID."""
        ...

    def list_all(self) -> List[Task]:
        """List every task, oldest first."""
        ...

    def add(self, entity: Task) -> Task:
        """Stage a new task."""
        ...

    def delete(self, id: str) -> bool:
        """Delete a task by ID."""
        ...

    def count(self) -> int:
        """Count stored tasks."""
        ...


class SqlAlchemyTaskRepository(SqlAlchemyRepository[Task]):
    """SQLAlchemy implementation of TaskRepository."""

    def __init__(self, session: Session):
        """Initialize with a SQLAlchemy session."""
        super().__init__(session, Task)

    def list_all(self) -> List[Task]:
        return self.session.query(Task).order_by(Task.created_at, Task.id).all()
