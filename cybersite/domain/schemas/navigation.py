"""Pydantic schemas for navigation items."""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from cybersite.domain.schemas.base import CamelModel, reject_null


class NavigationFields(CamelModel):
    path: Optional[str] = Field(None, max_length=500)
    external_url: Optional[str] = Field(None, max_length=1000)
    parent_id: Optional[int] = None
    icon: Optional[str] = Field(None, max_length=100)

    @field_validator("path", "external_url", mode="before")
    @classmethod
    def blank_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("path")
    @classmethod
    def internal_path(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.startswith("/"):
            raise ValueError("path must start with '/'")
        return v

    @field_validator("external_url")
    @classmethod
    def http_url(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.startswith(("http://", "https://")):
            raise ValueError("external URL must use http or https")
        return v

    @field_validator("parent_id", mode="before")
    @classmethod
    def zero_means_top_level(cls, v):
        # The admin form sends 0 for "None (Top Level)"
        return None if v == 0 else v

    @model_validator(mode="after")
    def path_xor_url(self):
        if self.path and self.external_url:
            raise ValueError("set either path or externalUrl, not both")
        return self


class NavigationItemCreate(NavigationFields):
    label: str = Field(..., min_length=1, max_length=200)
    sort_order: int = 0
    is_visible: bool = True


class NavigationItemUpdate(NavigationFields):
    label: Optional[str] = Field(None, min_length=1, max_length=200)
    sort_order: Optional[int] = None
    is_visible: Optional[bool] = None

    @field_validator("label", "sort_order", "is_visible")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class NavigationItemRead(CamelModel):
    id: int
    label: str
    path: Optional[str] = None
    external_url: Optional[str] = None
    parent_id: Optional[int] = None
    sort_order: int
    is_visible: bool
    icon: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
