from .db_base import Base
from .repository import BaseRepository, SqlAlchemyRepository

__all__ = [
    "Base",
    # Repository
    "BaseRepository",
    "SqlAlchemyRepository",
]
