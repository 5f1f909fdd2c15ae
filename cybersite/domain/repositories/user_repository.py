"""
User Repository Interface.
Users are created and refreshed by upsert and never deleted.
"""

from typing import Any, Dict, List, Optional, Protocol

from cybersite.domain.models.user import User


class UserRepository(Protocol):
    """Interface for User operations."""

    def get_by_id(self, id: str) -> Optional[User]:
        ...

    def upsert(self, data: Dict[str, Any]) -> User:
        """Insert a user or refresh its profile fields, keyed on id. Never changes an existing role."""
        ...

    def list_ordered(self) -> List[User]:
        ...

    def set_role(self, user: User, role: str) -> User:
        ...
