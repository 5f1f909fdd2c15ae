"""Public services API — active services with their active plans."""

from typing import List

from fastapi import APIRouter, Depends

from cybersite.application.services import catalog_service
from cybersite.domain.repositories.service_repository import ServicePlanRepository, ServiceRepository
from cybersite.domain.schemas.service import ServiceRead, ServiceWithPlans
from cybersite.interfaces.deps import get_service_plan_repository, get_service_repository

router = APIRouter(prefix="/api/services", tags=["Services"])


@router.get("", response_model=List[ServiceRead])
def list_services(repo: ServiceRepository = Depends(get_service_repository)):
    return catalog_service.list_public_services(repo)


@router.get("/{slug}", response_model=ServiceWithPlans)
def get_service(
    slug: str,
    repo: ServiceRepository = Depends(get_service_repository),
    plan_repo: ServicePlanRepository = Depends(get_service_plan_repository),
):
    return catalog_service.get_public_service(repo, plan_repo, slug)
