"""Media service — upload validation and the media library."""

import os
import re
import time
from typing import BinaryIO, List, Optional

import structlog

from cybersite.config import get_settings
from cybersite.core.exceptions import BadRequestException, EntityNotFoundException
from cybersite.domain.models.media_file import MediaFile
from cybersite.domain.repositories.media_repository import MediaRepository
from cybersite.domain.schemas.media import MediaFileUpdate
from cybersite.infrastructure.storage import StorageProvider

settings = get_settings()
logger = structlog.get_logger(__name__)

ALLOWED_MIME_TYPES = frozenset(
    {
        "image/jpeg",
        "image/jpg",
        "image/png",
        "image/gif",
        "image/webp",
        "image/svg+xml",
        "video/mp4",
    }
)


def validate_upload(content_type: Optional[str], size: int, max_bytes: Optional[int] = None) -> None:
    limit = max_bytes or settings.MAX_UPLOAD_BYTES
    if content_type not in ALLOWED_MIME_TYPES:
        raise BadRequestException(
            f"File type {content_type or 'unknown'} is not allowed",
            {"allowed": sorted(ALLOWED_MIME_TYPES)},
        )
    if size == 0:
        raise BadRequestException("File is empty")
    if size > limit:
        raise BadRequestException(
            f"File is larger than {limit // (1024 * 1024)} MB",
            {"size": size, "maxBytes": limit},
        )


def read_upload(stream: BinaryIO, max_bytes: Optional[int] = None) -> bytes:
    """Read an upload body, stopping one byte past the size ceiling."""
    limit = max_bytes or settings.MAX_UPLOAD_BYTES
    content = stream.read(limit + 1)
    if len(content) > limit:
        raise BadRequestException(
            f"File is larger than {limit // (1024 * 1024)} MB",
            {"maxBytes": limit},
        )
    return content


def storage_filename(original_name: str) -> str:
    """Timestamped, filesystem-safe name for a stored object."""
    base = os.path.basename(original_name or "upload")
    safe = re.sub(r"[^A-Za-z0-9._-]+", "_", base).strip("._") or "upload"
    return f"{int(time.time() * 1000)}_{safe}"


def list_media(repo: MediaRepository) -> List[MediaFile]:
    return repo.list_recent()


def get_media(repo: MediaRepository, media_id: int) -> MediaFile:
    media = repo.get_by_id(media_id)
    if media is None:
        raise EntityNotFoundException("Media file not found")
    return media


def upload_media(
    repo: MediaRepository,
    storage: StorageProvider,
    original_name: str,
    content_type: Optional[str],
    content: bytes,
    user_id: Optional[str] = None,
    alt: Optional[str] = None,
    caption: Optional[str] = None,
    tags: Optional[List[str]] = None,
) -> MediaFile:
    validate_upload(content_type, len(content))

    stored = storage.put(storage_filename(original_name), content, content_type)
    media = repo.create(
        {
            "filename": stored.filename,
            "original_name": original_name,
            "mime_type": content_type,
            "size": len(content),
            "path": stored.path,
            "url": stored.url,
            "alt": alt,
            "caption": caption,
            "tags": tags,
            "uploaded_by": user_id,
        }
    )
    logger.info("Media uploaded", media_id=media.id, filename=media.filename, size=media.size)
    return media


def update_media(repo: MediaRepository, media_id: int, data: MediaFileUpdate) -> MediaFile:
    media = get_media(repo, media_id)
    return repo.update(media, data.model_dump(exclude_unset=True))


def delete_media(repo: MediaRepository, storage: StorageProvider, media_id: int) -> MediaFile:
    media = get_media(repo, media_id)
    path = media.path
    repo.delete(media_id)
    storage.delete(path)
    return media
