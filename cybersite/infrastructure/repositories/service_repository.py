"""
SQLAlchemy Implementations of Service and ServicePlan Repositories.
"""

from typing import List, Optional

from cybersite.domain.models.service import Service, ServicePlan
from cybersite.domain.repositories.service_repository import (
    ServicePlanRepository,
    ServiceRepository,
)
from cybersite.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyServiceRepository(SQLAlchemyRepository[Service], ServiceRepository):
    """Service repository implementation using SQLAlchemy."""

    def get_by_slug(self, slug: str) -> Optional[Service]:
        return self.db.query(Service).filter(Service.slug == slug).first()

    def list_ordered(self, active_only: bool = False) -> List[Service]:
        query = self.db.query(Service)
        if active_only:
            query = query.filter(Service.is_active.is_(True))
        return query.order_by(Service.sort_order.asc(), Service.name.asc()).all()

    def count_active(self) -> int:
        return self.count(Service.is_active.is_(True))


class SQLAlchemyServicePlanRepository(SQLAlchemyRepository[ServicePlan], ServicePlanRepository):
    """ServicePlan repository implementation using SQLAlchemy."""

    def list_for_service(self, service_id: int, active_only: bool = False) -> List[ServicePlan]:
        query = self.db.query(ServicePlan).filter(ServicePlan.service_id == service_id)
        if active_only:
            query = query.filter(ServicePlan.is_active.is_(True))
        return query.order_by(ServicePlan.sort_order.asc(), ServicePlan.id.asc()).all()

    def count_for_service(self, service_id: int) -> int:
        return self.count(ServicePlan.service_id == service_id)

    def delete_for_service(self, service_id: int) -> int:
        removed = (
            self.db.query(ServicePlan)
            .filter(ServicePlan.service_id == service_id)
            .delete(synchronize_session="fetch")
        )
        self._save()
        return removed
