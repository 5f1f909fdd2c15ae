"""Audited unit of work for admin mutations.

``@audited`` wraps a sync route handler so its writes and exactly one
ActivityLog row commit together. Repositories see ``DEFER_COMMIT`` on the
session and only flush; the wrapper commits once at the end, or rolls
everything back when the handler or the audit write raises.
"""

import functools
import inspect
from typing import Any, Callable, Dict, Optional

import structlog
from pydantic import BaseModel

from cybersite.domain.enums import AuditAction
from cybersite.infrastructure.database import DEFER_COMMIT
from cybersite.infrastructure.repositories.activity_log_repository import SQLAlchemyActivityLogRepository
from cybersite.interfaces.api.deps import client_ip

logger = structlog.get_logger(__name__)

REQUIRED_PARAMS = ("request", "db", "user")


def _payload(kwargs: Dict[str, Any]) -> Optional[BaseModel]:
    for value in kwargs.values():
        if isinstance(value, BaseModel):
            return value
    return None


def audited(
    resource: str,
    action: str,
    describe: Optional[Callable[[Any], Dict[str, Any]]] = None,
    resource_key: str = "id",
):
    """Declare a route handler as an audited admin mutation.

    The handler must accept ``request``, ``db`` and ``user`` keyword arguments
    and return the affected entity. Update details are the submitted fields;
    create and delete details come from ``describe(entity)``. Delete handlers
    respond with a confirmation message instead of the entity.
    """
    action = AuditAction(action).value

    def decorator(func: Callable) -> Callable:
        params = inspect.signature(func).parameters
        missing = [name for name in REQUIRED_PARAMS if name not in params]
        if missing:
            raise TypeError(f"{func.__name__} must accept {', '.join(missing)} to be audited")

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            request, db, user = (kwargs[name] for name in REQUIRED_PARAMS)

            db.info[DEFER_COMMIT] = True
            try:
                entity = func(*args, **kwargs)

                if action == AuditAction.UPDATE.value:
                    payload = _payload(kwargs)
                    changes = payload.model_dump(exclude_unset=True, mode="json") if payload else {}
                    details = {"changes": changes}
                else:
                    details = describe(entity) if describe else None

                SQLAlchemyActivityLogRepository(db).record(
                    user_id=user.id,
                    action=action,
                    resource=resource,
                    resource_id=str(getattr(entity, resource_key)),
                    details=details,
                    ip_address=client_ip(request),
                    user_agent=request.headers.get("user-agent"),
                )
                db.commit()
            except Exception:
                db.rollback()
                raise
            finally:
                db.info.pop(DEFER_COMMIT, None)

            logger.info("Admin mutation", action=action, resource=resource, user_id=user.id)
            if action == AuditAction.DELETE.value:
                return {"message": f"{resource.replace('_', ' ').capitalize()} deleted successfully"}
            return entity

        return wrapper

    return decorator
