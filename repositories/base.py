"""
Base repository for the data access layer.

Every tracked record (logs, weigh-ins, workouts, goal phases, health
samples) belongs to one user, so the base class carries the user scoping
that the concrete repositories build their queries on.
"""

from typing import Generic, TypeVar, Optional, List, Type
from uuid import UUID
from sqlalchemy.orm import Query, Session
from abc import ABC

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """Shared persistence helpers; subclasses add their own lookups."""

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: UUID) -> Optional[ModelType]:
        """Lookup by primary key"""
        return self.db.get(self.model, entity_id)

    def owned_by(self, user_id: UUID) -> Query:
        """Query over the rows that belong to one user"""
        return self.db.query(self.model).filter(self.model.user_id == user_id)

    def get_all(self, skip: int = 0, limit: int = 100) -> List[ModelType]:
        return self.db.query(self.model).offset(skip).limit(limit).all()

    def create(self, entity: ModelType) -> ModelType:
        """Insert and commit; the returned row is refreshed from the database"""
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def update(self, entity: ModelType) -> ModelType:
        """Commit pending changes made to an attached row"""
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity_id: UUID) -> bool:
        """Delete by primary key; False when the row does not exist"""
        entity = self.get_by_id(entity_id)
        if entity is None:
            return False
        self.db.delete(entity)
        self.db.commit()
        return True
