from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, List, Any
from sqlalchemy.orm import Session


T = TypeVar('T')


class BaseRepository(ABC, Generic[T]):
    """Abstract base repository defining the interface for data access."""

    @abstractmethod
    def get(self, id: Any) -> Optional[T]:
        """Get an entity by its ID."""
        pass

    @abstractmethod
    def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[T]:
        """Get all entities, optionally windowed."""
        pass

    @abstractmethod
    def add(self, entity: T) -> T:
        """Add a new entity."""
        pass

    @abstractmethod
    def update(self, entity: T) -> T:
        """Update an existing entity."""
        pass

    @abstractmethod
    def delete(self, id: Any) -> bool:
        """Delete an entity by its ID."""
        pass

    @abstractmethod
    def exists(self, id: Any) -> bool:
        """Check if an entity exists by its ID."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Count stored entities."""
        pass


class SqlAlchemyRepository(BaseRepository[T]):
    """SQLAlchemy implementation of the base repository.

    Writes are flushed, never committed; the caller owns the transaction.
    """

    def __init__(self, session: Session, model_class: type):
        """
        Initialize the repository with a session and model class.

        Args:
            session: SQLAlchemy session
            model_class: SQLAlchemy model class to operate on
        """
        self.session = session
        self.model_class = model_class

    def get(self, id: Any) -> Optional[T]:
        return self.session.get(self.model_class, id)

    def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[T]:
        query = self.session.query(self.model_class).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def add(self, entity: T) -> T:
        self.session.add(entity)
        self.session.flush()  # Flush to get defaults populated without committing
        return entity

    def update(self, entity: T) -> T:
        merged = self.session.merge(entity)
        self.session.flush()
        return merged

    def delete(self, id: Any) -> bool:
        entity = self.get(id)
        if entity:
            self.session.delete(entity)
            self.session.flush()
            return True
        return False

    def exists(self, id: Any) -> bool:
        return self.session.query(
            self.session.query(self.model_class).filter(
                self.model_class.id == id
            ).exists()
        ).scalar()

    def count(self) -> int:
        return self.session.query(self.model_class).count()
