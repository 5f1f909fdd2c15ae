"""
Service and ServicePlan Repository Interfaces.
"""

from typing import List, Optional

from cybersite.domain.models.service import Service, ServicePlan
from cybersite.domain.repositories.base import BaseRepository


class ServiceRepository(BaseRepository[Service]):
    """Interface for Service-specific operations."""

    def get_by_slug(self, slug: str) -> Optional[Service]:
        """Get a service by its unique slug, active or not."""
        ...

    def list_ordered(self, active_only: bool = False) -> List[Service]:
        """List services by sort order, then name."""
        ...

    def count_active(self) -> int:
        ...


class ServicePlanRepository(BaseRepository[ServicePlan]):
    """Interface for ServicePlan-specific operations."""

    def list_for_service(self, service_id: int, active_only: bool = False) -> List[ServicePlan]:
        """List the plans of one service by sort order."""
        ...

    def count_for_service(self, service_id: int) -> int:
        """Count the plans attached to a service."""
        ...

    def delete_for_service(self, service_id: int) -> int:
        """Delete every plan of a service, returning how many were removed."""
        ...
