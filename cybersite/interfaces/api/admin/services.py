"""Admin services API — the hosting catalogue and the plans of each service."""

from typing import List

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from cybersite.application.services import catalog_service
from cybersite.domain.models.user import User
from cybersite.domain.repositories.service_repository import ServicePlanRepository, ServiceRepository
from cybersite.domain.schemas.service import (
    ServiceCreate,
    ServicePlanCreate,
    ServicePlanRead,
    ServiceRead,
    ServiceUpdate,
)
from cybersite.infrastructure.database import get_db
from cybersite.interfaces.api.admin.service_plans import describe_plan
from cybersite.interfaces.api.audit import audited
from cybersite.interfaces.api.deps import require_admin
from cybersite.interfaces.deps import get_service_plan_repository, get_service_repository

router = APIRouter(prefix="/api/admin/services", tags=["Admin: Services"], dependencies=[Depends(require_admin)])


def describe_service(service):
    return {"name": service.name, "slug": service.slug}


@router.get("", response_model=List[ServiceRead])
def list_services(repo: ServiceRepository = Depends(get_service_repository)):
    return catalog_service.list_services(repo)


@router.get("/{service_id}", response_model=ServiceRead)
def get_service(service_id: int, repo: ServiceRepository = Depends(get_service_repository)):
    return catalog_service.get_service(repo, service_id)


@router.post("", response_model=ServiceRead)
@audited("service", "create", describe=describe_service)
def create_service(
    payload: ServiceCreate,
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(require_admin),
    repo: ServiceRepository = Depends(get_service_repository),
):
    return catalog_service.create_service(repo, payload)


@router.put("/{service_id}", response_model=ServiceRead)
@audited("service", "update")
def update_service(
    service_id: int,
    payload: ServiceUpdate,
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(require_admin),
    repo: ServiceRepository = Depends(get_service_repository),
):
    return catalog_service.update_service(repo, service_id, payload)


@router.delete("/{service_id}")
@audited("service", "delete", describe=describe_service)
def delete_service(
    service_id: int,
    request: Request,
    cascade: bool = Query(False),
    db: Session = Depends(get_db),
    user: User = Depends(require_admin),
    repo: ServiceRepository = Depends(get_service_repository),
    plan_repo: ServicePlanRepository = Depends(get_service_plan_repository),
):
    return catalog_service.delete_service(repo, plan_repo, service_id, cascade=cascade)


@router.get("/{service_id}/plans", response_model=List[ServicePlanRead])
def list_plans(
    service_id: int,
    repo: ServiceRepository = Depends(get_service_repository),
    plan_repo: ServicePlanRepository = Depends(get_service_plan_repository),
):
    return catalog_service.list_plans(repo, plan_repo, service_id)


@router.post("/{service_id}/plans", response_model=ServicePlanRead)
@audited("service_plan", "create", describe=describe_plan)
def create_plan(
    service_id: int,
    payload: ServicePlanCreate,
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(require_admin),
    repo: ServiceRepository = Depends(get_service_repository),
    plan_repo: ServicePlanRepository = Depends(get_service_plan_repository),
):
    return catalog_service.create_plan(repo, plan_repo, service_id, payload)
