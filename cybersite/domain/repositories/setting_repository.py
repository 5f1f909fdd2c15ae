"""
Site Setting Repository Interface.
"""

from typing import Any, Dict, List, Optional

from cybersite.domain.models.site_setting import SiteSetting
from cybersite.domain.repositories.base import BaseRepository


class SiteSettingRepository(BaseRepository[SiteSetting]):
    """Interface for SiteSetting-specific operations."""

    def get_by_key(self, key: str) -> Optional[SiteSetting]:
        """Get a setting by its unique key."""
        ...

    def list_ordered(self, public_only: bool = False) -> List[SiteSetting]:
        """List settings ordered by key."""
        ...

    def upsert(self, data: Dict[str, Any]) -> SiteSetting:
        """Insert or update a setting in one statement keyed on `key`."""
        ...

    def delete_by_key(self, key: str) -> Optional[SiteSetting]:
        """Delete a setting by key."""
        ...
