"""Admin site-settings API."""

from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from cybersite.application.services import setting_service
from cybersite.domain.models.user import User
from cybersite.domain.repositories.setting_repository import SiteSettingRepository
from cybersite.domain.schemas.setting import SiteSettingRead, SiteSettingUpsert
from cybersite.infrastructure.database import get_db
from cybersite.interfaces.api.audit import audited
from cybersite.interfaces.api.deps import require_admin
from cybersite.interfaces.deps import get_setting_repository

router = APIRouter(prefix="/api/admin/settings", tags=["Admin: Settings"], dependencies=[Depends(require_admin)])


@router.get("", response_model=List[SiteSettingRead])
def list_settings(repo: SiteSettingRepository = Depends(get_setting_repository)):
    return setting_service.list_settings(repo)


@router.put("", response_model=SiteSettingRead)
@audited("site_setting", "update", resource_key="key")
def upsert_setting(
    payload: SiteSettingUpsert,
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(require_admin),
    repo: SiteSettingRepository = Depends(get_setting_repository),
):
    return setting_service.upsert_setting(repo, payload, user.id)


@router.delete("/{key}")
@audited("site_setting", "delete", describe=lambda s: {"key": s.key, "type": s.type}, resource_key="key")
def delete_setting(
    key: str,
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(require_admin),
    repo: SiteSettingRepository = Depends(get_setting_repository),
):
    return setting_service.delete_setting(repo, key)
