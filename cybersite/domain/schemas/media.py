"""Pydantic schemas for the media library."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from cybersite.domain.schemas.base import CamelModel


class MediaFileUpdate(CamelModel):
    alt: Optional[str] = Field(None, max_length=500)
    caption: Optional[str] = None
    tags: Optional[List[str]] = None


class MediaFileRead(CamelModel):
    id: int
    filename: str
    original_name: str
    mime_type: str
    size: int
    path: str
    url: str
    alt: Optional[str] = None
    caption: Optional[str] = None
    tags: Optional[List[str]] = None
    uploaded_by: Optional[str] = None
    created_at: Optional[datetime] = None
