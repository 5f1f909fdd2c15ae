"""Pydantic schemas for site settings."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from cybersite.domain.enums import SettingType
from cybersite.domain.schemas.base import CamelModel

SETTING_KEY_PATTERN = r"^[a-z0-9_.-]+$"


class SiteSettingUpsert(CamelModel):
    key: str = Field(..., min_length=1, max_length=200, pattern=SETTING_KEY_PATTERN)
    value: Any = None
    type: SettingType = SettingType.STRING.value
    description: Optional[str] = None
    is_public: bool = False


class SiteSettingRead(CamelModel):
    id: int
    key: str
    value: Any = None
    type: str
    description: Optional[str] = None
    is_public: bool
    updated_at: Optional[datetime] = None
    updated_by: Optional[str] = None
