"""
Repository for edusharing resource records.
"""

from typing import Any, List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from .base import BaseRepository, RepositoryError
from ..model.edusharing import Edusharing
from ..interface.edusharing import EdusharingResource, EdusharingQuery, edusharing_search


class EdusharingRepository(BaseRepository[Edusharing]):
    """Record store for embedded repository objects."""

    def __init__(self, db: Session):
        super().__init__(db, Edusharing)

    def insert_resource(self, resource: EdusharingResource) -> Edusharing:
        return self.create(resource.column_values())

    def get_resource(self, resource_id: int) -> EdusharingResource:
        """Detached snapshot of the persisted record."""
        return EdusharingResource.model_validate(self.get_by_id(resource_id))

    def update_resource(self, resource: EdusharingResource, exclude_none: bool = True) -> Edusharing:
        if resource.id is None:
            raise RepositoryError("Cannot update edusharing resource without id")
        return self.update(resource.id, resource.column_values(exclude_none=exclude_none))

    def restore_resource(self, memento: EdusharingResource) -> Edusharing:
        """Write a previously taken snapshot back, including empty columns."""
        return self.update(memento.id, memento.column_values(exclude_none=False))

    def set_field(self, resource_id: int, field: str, value: Any) -> int:
        """Set one column on the matching record, returns the number of rows touched."""
        try:
            count = self._filtered(id=resource_id).update({field: value}, synchronize_session=False)
            self.db.commit()
            return count
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Failed to set {field} on {self.model.__name__} {resource_id}: {str(e)}")

    def search(self, params: Optional[EdusharingQuery] = None) -> List[Edusharing]:
        params = params or EdusharingQuery()
        try:
            query = edusharing_search(self.db, self.db.query(Edusharing), params)
            query = query.order_by(Edusharing.id)
            if params.skip:
                query = query.offset(params.skip)
            if params.limit is not None:
                query = query.limit(params.limit)
            return query.all()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to query {self.model.__name__}: {str(e)}")
