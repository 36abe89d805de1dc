"""
Task resource model.
"""
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func
from datetime import datetime, timezone
import uuid

from ..shared.db_base import Base


def generate_task_id() -> str:
    """Return a new random task id."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Task(Base):
    __tablename__ = "tasks"

    id = Column(String, primary_key=True, default=generate_task_id)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)

    # Timestamps; created_at is set client-side so listings keep microsecond order
    created_at = Column(DateTime(timezone=True), default=utc_now, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<Task(id='{self.id}', name='{self.name}')>"
