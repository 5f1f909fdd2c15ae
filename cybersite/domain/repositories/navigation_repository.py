"""
Navigation Repository Interface.
"""

from typing import List

from cybersite.domain.models.navigation_item import NavigationItem
from cybersite.domain.repositories.base import BaseRepository


class NavigationRepository(BaseRepository[NavigationItem]):
    """Interface for NavigationItem-specific operations."""

    def list_ordered(self, visible_only: bool = False) -> List[NavigationItem]:
        """List navigation items by sort order."""
        ...

    def list_children(self, parent_id: int) -> List[NavigationItem]:
        """List the direct children of an item."""
        ...
