"""
SQLAlchemy Implementation of Media Repository.
"""

from typing import List

from cybersite.domain.models.media_file import MediaFile
from cybersite.domain.repositories.media_repository import MediaRepository
from cybersite.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyMediaRepository(SQLAlchemyRepository[MediaFile], MediaRepository):
    """Media repository implementation using SQLAlchemy."""

    def list_recent(self) -> List[MediaFile]:
        return self.db.query(MediaFile).order_by(MediaFile.created_at.desc(), MediaFile.id.desc()).all()
