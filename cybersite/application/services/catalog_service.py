"""Catalog service — hosting services and their pricing plans."""

from typing import List, Optional

import structlog

from cybersite.core.exceptions import ConflictException, EntityNotFoundException
from cybersite.domain.models.service import Service, ServicePlan
from cybersite.domain.repositories.service_repository import (
    ServicePlanRepository,
    ServiceRepository,
)
from cybersite.domain.schemas.service import (
    ServiceCreate,
    ServicePlanCreate,
    ServicePlanRead,
    ServicePlanUpdate,
    ServiceRead,
    ServiceUpdate,
    ServiceWithPlans,
)

logger = structlog.get_logger(__name__)


def with_plans(service: Service, plans: List[ServicePlan]) -> ServiceWithPlans:
    detail = ServiceRead.model_validate(service).model_dump()
    return ServiceWithPlans(**detail, plans=[ServicePlanRead.model_validate(p) for p in plans])


# --- Public -----------------------------------------------------------------

def list_public_services(repo: ServiceRepository) -> List[Service]:
    return repo.list_ordered(active_only=True)


def get_public_service(
    repo: ServiceRepository, plan_repo: ServicePlanRepository, slug: str
) -> ServiceWithPlans:
    service = repo.get_by_slug(slug)
    if service is None or not service.is_active:
        raise EntityNotFoundException("Service not found")
    return with_plans(service, plan_repo.list_for_service(service.id, active_only=True))


# --- Services ---------------------------------------------------------------

def list_services(repo: ServiceRepository) -> List[Service]:
    return repo.list_ordered()


def get_service(repo: ServiceRepository, service_id: int) -> Service:
    service = repo.get_by_id(service_id)
    if service is None:
        raise EntityNotFoundException("Service not found")
    return service


def _ensure_slug_free(repo: ServiceRepository, slug: str, service_id: Optional[int] = None) -> None:
    existing = repo.get_by_slug(slug)
    if existing is not None and existing.id != service_id:
        raise ConflictException(f"A service with slug '{slug}' already exists", {"slug": slug})


def create_service(repo: ServiceRepository, data: ServiceCreate) -> Service:
    _ensure_slug_free(repo, data.slug)
    service = repo.create(data.model_dump())
    logger.info("Service created", service_id=service.id, slug=service.slug)
    return service


def update_service(repo: ServiceRepository, service_id: int, data: ServiceUpdate) -> Service:
    service = get_service(repo, service_id)
    changes = data.model_dump(exclude_unset=True)
    if "slug" in changes and changes["slug"] != service.slug:
        _ensure_slug_free(repo, changes["slug"], service_id)
    return repo.update(service, changes)


def delete_service(
    repo: ServiceRepository,
    plan_repo: ServicePlanRepository,
    service_id: int,
    cascade: bool = False,
) -> Service:
    """Delete a service. Its plans block the delete unless `cascade` removes them too."""
    service = get_service(repo, service_id)
    plan_count = plan_repo.count_for_service(service_id)
    if plan_count and not cascade:
        raise ConflictException(
            "Service still has pricing plans; delete them first or pass cascade=true",
            {"plans": plan_count},
        )
    if plan_count:
        plan_repo.delete_for_service(service_id)
    repo.delete(service_id)
    logger.info("Service deleted", service_id=service_id, plans_removed=plan_count)
    return service


# --- Plans ------------------------------------------------------------------

def list_plans(repo: ServiceRepository, plan_repo: ServicePlanRepository, service_id: int) -> List[ServicePlan]:
    get_service(repo, service_id)
    return plan_repo.list_for_service(service_id)


def get_plan(plan_repo: ServicePlanRepository, plan_id: int) -> ServicePlan:
    plan = plan_repo.get_by_id(plan_id)
    if plan is None:
        raise EntityNotFoundException("Service plan not found")
    return plan


def create_plan(
    repo: ServiceRepository,
    plan_repo: ServicePlanRepository,
    service_id: int,
    data: ServicePlanCreate,
) -> ServicePlan:
    get_service(repo, service_id)
    values = data.model_dump(exclude={"service_id"})
    values["service_id"] = service_id
    plan = plan_repo.create(values)
    logger.info("Service plan created", plan_id=plan.id, service_id=service_id)
    return plan


def update_plan(plan_repo: ServicePlanRepository, plan_id: int, data: ServicePlanUpdate) -> ServicePlan:
    plan = get_plan(plan_repo, plan_id)
    return plan_repo.update(plan, data.model_dump(exclude_unset=True))


def delete_plan(plan_repo: ServicePlanRepository, plan_id: int) -> ServicePlan:
    plan = get_plan(plan_repo, plan_id)
    plan_repo.delete(plan_id)
    return plan
