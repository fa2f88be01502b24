"""
Identity-keyed persistence gateways.

Gateways flush but never commit: the calling service owns the transaction
boundary, so an entity write and its association writes commit or roll back
together.
"""

from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from ..db import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """
    Generic CRUD gateway for a model with an integer ``id`` primary key.

    Subclasses set ``model`` and may add model-specific queries.
    """

    model: Type[ModelT]

    def find_all(self, db: Session) -> List[ModelT]:
        """Return every row in primary-key order"""
        return db.query(self.model).order_by(self.model.id).all()

    def find_by_id(self, db: Session, entity_id: int) -> Optional[ModelT]:
        return db.get(self.model, entity_id)

    def exists_by_id(self, db: Session, entity_id: int) -> bool:
        return db.query(self.model.id).filter(self.model.id == entity_id).first() is not None

    def save(self, db: Session, entity: ModelT) -> ModelT:
        """
        Stage an entity (new or already persistent) and flush it.

        Args:
            db: Database session
            entity: Model instance to persist

        Returns:
            The same instance with its generated id populated
        """
        db.add(entity)
        db.flush()
        return entity

    def delete_by_id(self, db: Session, entity_id: int) -> bool:
        """
        Delete a row through the ORM so relationship cascades apply.

        Returns:
            True if a row was deleted, False if none matched
        """
        entity = self.find_by_id(db, entity_id)
        if entity is None:
            return False
        db.delete(entity)
        db.flush()
        return True
