"""Admin dashboard and activity-log API."""

from typing import List

from fastapi import APIRouter, Depends, Query

from cybersite.application.services.dashboard_service import get_dashboard_stats
from cybersite.domain.repositories.activity_log_repository import ActivityLogRepository
from cybersite.domain.repositories.contact_repository import ContactRepository
from cybersite.domain.repositories.media_repository import MediaRepository
from cybersite.domain.repositories.page_repository import PageRepository
from cybersite.domain.repositories.service_repository import ServicePlanRepository, ServiceRepository
from cybersite.domain.schemas.activity import ActivityLogRead, DashboardStats
from cybersite.interfaces.api.deps import require_admin
from cybersite.interfaces.deps import (
    get_activity_log_repository,
    get_contact_repository,
    get_media_repository,
    get_page_repository,
    get_service_plan_repository,
    get_service_repository,
)

router = APIRouter(prefix="/api/admin", tags=["Admin: Dashboard"], dependencies=[Depends(require_admin)])


@router.get("/dashboard/stats", response_model=DashboardStats)
def dashboard_stats(
    page_repo: PageRepository = Depends(get_page_repository),
    service_repo: ServiceRepository = Depends(get_service_repository),
    plan_repo: ServicePlanRepository = Depends(get_service_plan_repository),
    media_repo: MediaRepository = Depends(get_media_repository),
    contact_repo: ContactRepository = Depends(get_contact_repository),
):
    return get_dashboard_stats(page_repo, service_repo, plan_repo, media_repo, contact_repo)


@router.get("/activity-logs", response_model=List[ActivityLogRead])
def activity_logs(
    limit: int = Query(50, ge=1, le=500),
    repo: ActivityLogRepository = Depends(get_activity_log_repository),
):
    return repo.list_recent(limit)
