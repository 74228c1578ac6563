"""
Base repository for the data access layer.

Subclasses bind a model; child repositories (expenses, recipe components)
use ``_owned_children`` so the parent's owner is checked inside the query.
"""

from typing import Generic, TypeVar, Optional, Type
from sqlalchemy.orm import Query, Session
from abc import ABC

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """CRUD on one mapped model, committing after each write"""

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    @property
    def primary_key(self):
        return self.model.__mapper__.primary_key[0]

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        """
        Look up a row by its integer identity.

        Args:
            entity_id: Primary key value

        Returns:
            The row, or None if absent
        """
        return self.db.get(self.model, entity_id)

    def create(self, entity: ModelType) -> ModelType:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def update(self, entity: ModelType) -> ModelType:
        """Commit pending changes on ``entity`` and reload it"""
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity_id: int) -> bool:
        """Delete by id; ORM cascades remove owned children. False if absent"""
        entity = self.get_by_id(entity_id)
        if entity is None:
            return False
        self.db.delete(entity)
        self.db.commit()
        return True

    def _owned_children(self, parent, parent_id: int, user_id: int) -> Query:
        """Rows of this model under ``parent_id``, only if ``user_id`` owns the parent"""
        parent_pk = parent.__mapper__.primary_key[0]
        return (
            self.db.query(self.model)
            .join(parent, getattr(self.model, parent_pk.key) == parent_pk)
            .filter(parent_pk == parent_id, parent.user_id == user_id)
        )
