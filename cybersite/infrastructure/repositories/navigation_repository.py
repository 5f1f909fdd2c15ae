"""
SQLAlchemy Implementation of Navigation Repository.
"""

from typing import List

from cybersite.domain.models.navigation_item import NavigationItem
from cybersite.domain.repositories.navigation_repository import NavigationRepository
from cybersite.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyNavigationRepository(SQLAlchemyRepository[NavigationItem], NavigationRepository):
    """Navigation repository implementation using SQLAlchemy."""

    def list_ordered(self, visible_only: bool = False) -> List[NavigationItem]:
        query = self.db.query(NavigationItem)
        if visible_only:
            query = query.filter(NavigationItem.is_visible.is_(True))
        return query.order_by(NavigationItem.sort_order.asc(), NavigationItem.id.asc()).all()

    def list_children(self, parent_id: int) -> List[NavigationItem]:
        return (
            self.db.query(NavigationItem)
            .filter(NavigationItem.parent_id == parent_id)
            .order_by(NavigationItem.sort_order.asc(), NavigationItem.id.asc())
            .all()
        )
