"""
Base repository pattern implementation.

Thin abstraction over a SQLAlchemy session. Every database failure is
converted into a RepositoryError so callers only need to handle one
exception family.
"""

from typing import TypeVar, Generic, List, Optional, Dict, Any, Type
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

# Type variable for generic entity type
T = TypeVar('T')


class RepositoryError(Exception):
    """Base exception for repository operations."""
    pass


class NotFoundError(RepositoryError):
    """Exception raised when entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any):
        super().__init__(f"{entity_type} with id {entity_id} not found")
        self.entity_type = entity_type
        self.entity_id = entity_id


class DuplicateError(RepositoryError):
    """Exception raised when attempting to create duplicate entity."""

    def __init__(self, entity_type: str, criteria: Dict[str, Any]):
        super().__init__(f"{entity_type} already exists with criteria: {criteria}")
        self.entity_type = entity_type
        self.criteria = criteria


class BaseRepository(Generic[T]):
    """
    Base repository providing create/read/update/delete-by-filter operations.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize repository with database session and model class.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: Any) -> T:
        """
        Get entity by ID.

        Raises:
            NotFoundError: If entity not found
            RepositoryError: If the query fails
        """
        entity = self.get_by_id_optional(entity_id)
        if entity is None:
            raise NotFoundError(self.model.__name__, entity_id)
        return entity

    def get_by_id_optional(self, entity_id: Any) -> Optional[T]:
        try:
            return self.db.query(self.model).filter(
                self.model.id == entity_id
            ).first()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to load {self.model.__name__}: {str(e)}")

    def create(self, values: Dict[str, Any]) -> T:
        """
        Create a new entity from column values.

        Returns:
            Created entity with generated fields (e.g., ID)

        Raises:
            DuplicateError: If entity violates unique constraints
            RepositoryError: If database operation fails
        """
        entity = self.model(**values)
        try:
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)
            return entity
        except IntegrityError:
            self.db.rollback()
            raise DuplicateError(self.model.__name__, values)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Failed to create {self.model.__name__}: {str(e)}")

    def update(self, entity_id: Any, updates: Dict[str, Any]) -> T:
        """
        Update an existing entity.

        Raises:
            NotFoundError: If entity not found
            RepositoryError: If update fails
        """
        entity = self.get_by_id(entity_id)

        try:
            for key, value in updates.items():
                if hasattr(entity, key):
                    setattr(entity, key, value)

            self.db.commit()
            self.db.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Failed to update {self.model.__name__}: {str(e)}")

    def delete_by(self, **criteria) -> int:
        """
        Delete all entities matching the criteria.

        Returns:
            Number of deleted rows
        """
        try:
            count = self._filtered(**criteria).delete(synchronize_session=False)
            self.db.commit()
            return count
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Failed to delete {self.model.__name__}: {str(e)}")

    def find_by(self, **criteria) -> List[T]:
        try:
            return self._filtered(**criteria).all()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to query {self.model.__name__}: {str(e)}")

    def _filtered(self, **criteria):
        query = self.db.query(self.model)

        for key, value in criteria.items():
            if hasattr(self.model, key):
                query = query.filter(getattr(self.model, key) == value)

        return query
