"""Public settings API."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from cybersite.application.services import setting_service
from cybersite.domain.repositories.setting_repository import SiteSettingRepository
from cybersite.interfaces.deps import get_setting_repository

router = APIRouter(prefix="/api/settings", tags=["Settings"])


@router.get("/public")
def public_settings(repo: SiteSettingRepository = Depends(get_setting_repository)) -> Dict[str, Any]:
    return setting_service.get_public_settings(repo)
