"""Admin service-plan API — plan routes addressed by plan id."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from cybersite.application.services import catalog_service
from cybersite.domain.models.user import User
from cybersite.domain.repositories.service_repository import ServicePlanRepository, ServiceRepository
from cybersite.domain.schemas.service import (
    ServicePlanCreateForService,
    ServicePlanRead,
    ServicePlanUpdate,
)
from cybersite.infrastructure.database import get_db
from cybersite.interfaces.api.audit import audited
from cybersite.interfaces.api.deps import require_admin
from cybersite.interfaces.deps import get_service_plan_repository, get_service_repository

router = APIRouter(
    prefix="/api/admin/service-plans",
    tags=["Admin: Service Plans"],
    dependencies=[Depends(require_admin)],
)


def describe_plan(plan):
    return {"name": plan.name, "serviceId": plan.service_id}


@router.post("", response_model=ServicePlanRead)
@audited("service_plan", "create", describe=describe_plan)
def create_plan(
    payload: ServicePlanCreateForService,
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(require_admin),
    repo: ServiceRepository = Depends(get_service_repository),
    plan_repo: ServicePlanRepository = Depends(get_service_plan_repository),
):
    return catalog_service.create_plan(repo, plan_repo, payload.service_id, payload)


@router.put("/{plan_id}", response_model=ServicePlanRead)
@audited("service_plan", "update")
def update_plan(
    plan_id: int,
    payload: ServicePlanUpdate,
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(require_admin),
    plan_repo: ServicePlanRepository = Depends(get_service_plan_repository),
):
    return catalog_service.update_plan(plan_repo, plan_id, payload)


@router.delete("/{plan_id}")
@audited("service_plan", "delete", describe=describe_plan)
def delete_plan(
    plan_id: int,
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(require_admin),
    plan_repo: ServicePlanRepository = Depends(get_service_plan_repository),
):
    return catalog_service.delete_plan(plan_repo, plan_id)
