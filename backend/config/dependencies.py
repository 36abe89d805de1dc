"""Common dependencies for FastAPI routes."""

from .db import get_db

__all__ = ["get_db"]
