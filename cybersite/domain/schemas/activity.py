"""Pydantic schemas for the activity log and dashboard."""

from datetime import datetime
from typing import Any, Optional

from cybersite.domain.schemas.base import CamelModel


class ActivityLogRead(CamelModel):
    id: int
    user_id: Optional[str] = None
    action: str
    resource: str
    resource_id: Optional[str] = None
    details: Any = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    created_at: Optional[datetime] = None


class DashboardStats(CamelModel):
    total_pages: int
    published_pages: int
    total_services: int
    active_services: int
    total_plans: int
    total_media_files: int
    total_contacts: int
    new_contacts: int
    contacts_today: int
