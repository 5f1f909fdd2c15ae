"""
SQLAlchemy implementation of the Base Repository.
"""

from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import func
from sqlalchemy.orm import Session

from cybersite.domain.repositories.base import BaseRepository
from cybersite.infrastructure.database import DEFER_COMMIT, Base

ModelType = TypeVar("ModelType", bound=Base)

# Never written from request payloads
PROTECTED_FIELDS = {"id", "created_at", "updated_at"}


def dialect_insert(db: Session):
    """Return the dialect-specific `insert` that supports ON CONFLICT."""
    if db.get_bind().dialect.name == "postgresql":
        from sqlalchemy.dialects.postgresql import insert
    else:
        from sqlalchemy.dialects.sqlite import insert
    return insert


class SQLAlchemyRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository implementation for SQLAlchemy models."""

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, id: Any) -> Optional[ModelType]:
        return self.db.get(self.model, id)

    def list(self, skip: int = 0, limit: int = 100) -> List[ModelType]:
        return self.db.query(self.model).order_by(self.model.id).offset(skip).limit(limit).all()

    def count(self, *criteria: Any) -> int:
        query = self.db.query(func.count(self.model.id))
        if criteria:
            query = query.filter(*criteria)
        return query.scalar() or 0

    def create(self, obj_in: Any) -> ModelType:
        obj_data = self._to_dict(obj_in)
        db_obj = self.model(**{k: v for k, v in obj_data.items() if k not in PROTECTED_FIELDS})
        self.db.add(db_obj)
        self._save(db_obj)
        return db_obj

    def update(self, db_obj: ModelType, obj_in: Any) -> ModelType:
        update_data = self._to_dict(obj_in)

        for field, value in update_data.items():
            if field in PROTECTED_FIELDS:
                continue
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        if hasattr(self.model, "updated_at"):
            db_obj.updated_at = func.now()

        self.db.add(db_obj)
        self._save(db_obj)
        return db_obj

    def delete(self, id: Any) -> Optional[ModelType]:
        obj = self.db.get(self.model, id)
        if obj:
            self.db.delete(obj)
            self._save()
        return obj

    def _save(self, *objs: Any) -> None:
        """Commit, or only flush while an audited unit of work owns the transaction."""
        if self.db.info.get(DEFER_COMMIT):
            self.db.flush()
        else:
            self.db.commit()
        for obj in objs:
            self.db.refresh(obj)

    @staticmethod
    def _to_dict(obj_in: Any) -> dict:
        if isinstance(obj_in, BaseModel):
            return obj_in.model_dump(exclude_unset=True)
        return dict(obj_in)
