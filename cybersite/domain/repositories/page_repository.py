"""
Page Repository Interface.
"""

from typing import List, Optional

from cybersite.domain.models.page import Page
from cybersite.domain.repositories.base import BaseRepository


class PageRepository(BaseRepository[Page]):
    """Interface for Page-specific operations."""

    def get_by_slug(self, slug: str) -> Optional[Page]:
        """Get a page by its unique slug, published or not."""
        ...

    def list_ordered(self, published_only: bool = False) -> List[Page]:
        """List pages by sort order, most recently updated first within a tie."""
        ...

    def count_published(self) -> int:
        ...
