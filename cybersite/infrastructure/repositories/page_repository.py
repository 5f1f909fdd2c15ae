"""
SQLAlchemy Implementation of Page Repository.
"""

from typing import List, Optional

from cybersite.domain.models.page import Page
from cybersite.domain.repositories.page_repository import PageRepository
from cybersite.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyPageRepository(SQLAlchemyRepository[Page], PageRepository):
    """Page repository implementation using SQLAlchemy."""

    def get_by_slug(self, slug: str) -> Optional[Page]:
        return self.db.query(Page).filter(Page.slug == slug).first()

    def list_ordered(self, published_only: bool = False) -> List[Page]:
        query = self.db.query(Page)
        if published_only:
            query = query.filter(Page.is_published.is_(True))
        return query.order_by(Page.sort_order.asc(), Page.updated_at.desc(), Page.id.asc()).all()

    def count_published(self) -> int:
        return self.count(Page.is_published.is_(True))
