"""Pydantic schemas for User and session handling."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from cybersite.domain.enums import UserRole
from cybersite.domain.schemas.base import CamelModel


class UserRead(CamelModel):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SessionRequest(CamelModel):
    token: str = Field(..., min_length=1)


class RoleUpdate(CamelModel):
    role: UserRole
