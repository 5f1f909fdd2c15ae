"""Admin media API — multipart uploads and library metadata."""

import json
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from sqlalchemy.orm import Session

from cybersite.application.services import media_service
from cybersite.core.exceptions import BadRequestException
from cybersite.domain.models.user import User
from cybersite.domain.repositories.media_repository import MediaRepository
from cybersite.domain.schemas.media import MediaFileRead, MediaFileUpdate
from cybersite.infrastructure.database import get_db
from cybersite.infrastructure.storage import StorageProvider
from cybersite.interfaces.api.audit import audited
from cybersite.interfaces.api.deps import require_admin
from cybersite.interfaces.deps import get_media_repository, get_storage

router = APIRouter(prefix="/api/admin/media", tags=["Admin: Media"], dependencies=[Depends(require_admin)])


def describe_media(media):
    return {"filename": media.filename, "mimeType": media.mime_type, "size": media.size}


def parse_tags(raw: Optional[str]) -> Optional[List[str]]:
    """Tags arrive as a JSON array string or a comma separated list."""
    if raw is None or not raw.strip():
        return None
    text = raw.strip()
    if text.startswith("["):
        try:
            tags = json.loads(text)
        except ValueError:
            raise BadRequestException("Tags must be a JSON array of strings")
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise BadRequestException("Tags must be a JSON array of strings")
        return tags
    return [t.strip() for t in text.split(",") if t.strip()]


@router.get("", response_model=List[MediaFileRead])
def list_media(repo: MediaRepository = Depends(get_media_repository)):
    return media_service.list_media(repo)


@router.post("", response_model=MediaFileRead)
@audited("media", "create", describe=describe_media)
def upload_media(
    request: Request,
    file: UploadFile = File(...),
    alt: Optional[str] = Form(None),
    caption: Optional[str] = Form(None),
    tags: Optional[str] = Form(None),
    db: Session = Depends(get_db),
    user: User = Depends(require_admin),
    repo: MediaRepository = Depends(get_media_repository),
    storage: StorageProvider = Depends(get_storage),
):
    if file.size is not None:
        media_service.validate_upload(file.content_type, file.size)
    content = media_service.read_upload(file.file)
    return media_service.upload_media(
        repo,
        storage,
        original_name=file.filename or "upload",
        content_type=file.content_type,
        content=content,
        user_id=user.id,
        alt=alt,
        caption=caption,
        tags=parse_tags(tags),
    )


@router.put("/{media_id}", response_model=MediaFileRead)
@audited("media", "update")
def update_media(
    media_id: int,
    payload: MediaFileUpdate,
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(require_admin),
    repo: MediaRepository = Depends(get_media_repository),
):
    return media_service.update_media(repo, media_id, payload)


@router.delete("/{media_id}")
@audited("media", "delete", describe=describe_media)
def delete_media(
    media_id: int,
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(require_admin),
    repo: MediaRepository = Depends(get_media_repository),
    storage: StorageProvider = Depends(get_storage),
):
    return media_service.delete_media(repo, storage, media_id)
