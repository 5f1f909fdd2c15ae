"""
Media Repository Interface.
"""

from typing import List

from cybersite.domain.models.media_file import MediaFile
from cybersite.domain.repositories.base import BaseRepository


class MediaRepository(BaseRepository[MediaFile]):
    """Interface for MediaFile-specific operations."""

    def list_recent(self) -> List[MediaFile]:
        """List media files, newest first."""
        ...
