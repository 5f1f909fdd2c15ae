"""Dashboard service — admin overview counters."""

from datetime import date, datetime, time

import pytz

from cybersite.config import get_settings
from cybersite.domain.enums import ContactStatus
from cybersite.domain.repositories.contact_repository import ContactRepository
from cybersite.domain.repositories.media_repository import MediaRepository
from cybersite.domain.repositories.page_repository import PageRepository
from cybersite.domain.repositories.service_repository import (
    ServicePlanRepository,
    ServiceRepository,
)
from cybersite.domain.schemas.activity import DashboardStats

settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)


def get_current_date() -> date:
    """Get current date in the configured timezone."""
    return datetime.now(tz).date()


def start_of_today_utc() -> datetime:
    """Midnight of the local calendar day, as a naive UTC timestamp."""
    local_midnight = tz.localize(datetime.combine(get_current_date(), time.min))
    return local_midnight.astimezone(pytz.utc).replace(tzinfo=None)


def get_dashboard_stats(
    page_repo: PageRepository,
    service_repo: ServiceRepository,
    plan_repo: ServicePlanRepository,
    media_repo: MediaRepository,
    contact_repo: ContactRepository,
) -> DashboardStats:
    return DashboardStats(
        total_pages=page_repo.count(),
        published_pages=page_repo.count_published(),
        total_services=service_repo.count(),
        active_services=service_repo.count_active(),
        total_plans=plan_repo.count(),
        total_media_files=media_repo.count(),
        total_contacts=contact_repo.count(),
        new_contacts=contact_repo.count_by_status(ContactStatus.NEW.value),
        contacts_today=contact_repo.count_since(start_of_today_utc()),
    )
