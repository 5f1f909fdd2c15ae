"""
Activity Log Repository Interface.
Append-only: there is no update or delete.
"""

from typing import Any, Dict, List, Optional, Protocol

from cybersite.domain.models.activity_log import ActivityLog


class ActivityLogRepository(Protocol):
    """Interface for the audit trail."""

    def record(
        self,
        user_id: Optional[str],
        action: str,
        resource: str,
        resource_id: Optional[str],
        details: Optional[Dict[str, Any]] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> ActivityLog:
        """Append one audit entry."""
        ...

    def list_recent(self, limit: int = 50) -> List[ActivityLog]:
        """List the most recent entries first."""
        ...
