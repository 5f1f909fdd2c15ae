"""
SQLAlchemy Implementation of Activity Log Repository.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from cybersite.domain.models.activity_log import ActivityLog
from cybersite.domain.repositories.activity_log_repository import ActivityLogRepository
from cybersite.infrastructure.database import DEFER_COMMIT


class SQLAlchemyActivityLogRepository(ActivityLogRepository):
    """Append-only audit trail backed by the activity_logs table."""

    def __init__(self, db: Session):
        self.db = db

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
        entry = ActivityLog(
            user_id=user_id,
            action=action,
            resource=resource,
            resource_id=resource_id,
            details=details,
            ip_address=ip_address,
            user_agent=user_agent,
        )
        self.db.add(entry)
        if self.db.info.get(DEFER_COMMIT):
            self.db.flush()
        else:
            self.db.commit()
        self.db.refresh(entry)
        return entry

    def list_recent(self, limit: int = 50) -> List[ActivityLog]:
        return (
            self.db.query(ActivityLog)
            .order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc())
            .limit(limit)
            .all()
        )
