"""
Contact Submission Repository Interface.
"""

from datetime import datetime
from typing import List, Optional

from cybersite.domain.models.contact_submission import ContactSubmission
from cybersite.domain.repositories.base import BaseRepository


class ContactRepository(BaseRepository[ContactSubmission]):
    """Interface for ContactSubmission-specific operations."""

    def list_recent(self, status: Optional[str] = None) -> List[ContactSubmission]:
        """List submissions newest first, optionally filtered by status."""
        ...

    def count_since(self, since: datetime) -> int:
        """Count submissions created at or after a timestamp."""
        ...

    def count_by_status(self, status: str) -> int:
        ...
