"""
SQLAlchemy Implementation of Contact Submission Repository.
"""

from datetime import datetime
from typing import List, Optional

from cybersite.domain.models.contact_submission import ContactSubmission
from cybersite.domain.repositories.contact_repository import ContactRepository
from cybersite.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyContactRepository(SQLAlchemyRepository[ContactSubmission], ContactRepository):
    """Contact submission repository implementation using SQLAlchemy."""

    def list_recent(self, status: Optional[str] = None) -> List[ContactSubmission]:
        query = self.db.query(ContactSubmission)
        if status:
            query = query.filter(ContactSubmission.status == status)
        return query.order_by(ContactSubmission.created_at.desc(), ContactSubmission.id.desc()).all()

    def count_since(self, since: datetime) -> int:
        return self.count(ContactSubmission.created_at >= since)

    def count_by_status(self, status: str) -> int:
        return self.count(ContactSubmission.status == status)
