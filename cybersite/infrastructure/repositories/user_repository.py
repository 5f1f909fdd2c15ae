"""
SQLAlchemy Implementation of User Repository.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from cybersite.domain.models.user import User
from cybersite.domain.repositories.user_repository import UserRepository
from cybersite.infrastructure.database import DEFER_COMMIT
from cybersite.infrastructure.repositories.base_repository import dialect_insert

PROFILE_FIELDS = ("email", "first_name", "last_name", "profile_image_url")


class SQLAlchemyUserRepository(UserRepository):
    """User repository implementation using SQLAlchemy."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, id: str) -> Optional[User]:
        return self.db.get(User, id)

    def upsert(self, data: Dict[str, Any]) -> User:
        values = {"id": data["id"], "role": data.get("role", "viewer")}
        values.update({field: data.get(field) for field in PROFILE_FIELDS})

        insert = dialect_insert(self.db)
        stmt = insert(User).values(**values)
        # Existing users keep their role
        stmt = stmt.on_conflict_do_update(
            index_elements=[User.id],
            set_={**{field: values[field] for field in PROFILE_FIELDS}, "updated_at": func.now()},
        )
        self.db.execute(stmt)
        self._commit()
        return self.db.query(User).filter(User.id == values["id"]).populate_existing().one()

    def list_ordered(self) -> List[User]:
        return self.db.query(User).order_by(User.created_at.asc(), User.id.asc()).all()

    def set_role(self, user: User, role: str) -> User:
        user.role = role
        user.updated_at = func.now()
        self.db.add(user)
        self._commit()
        self.db.refresh(user)
        return user

    def _commit(self) -> None:
        if self.db.info.get(DEFER_COMMIT):
            self.db.flush()
        else:
            self.db.commit()
