"""FastAPI dependency — session auth and role checks."""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from cybersite.application.services.auth_service import resolve_session
from cybersite.config import get_settings
from cybersite.core.exceptions import ForbiddenException
from cybersite.domain.enums import ADMIN_ROLES, UserRole
from cybersite.domain.models.user import User
from cybersite.domain.repositories.user_repository import UserRepository
from cybersite.interfaces.deps import get_user_repository

settings = get_settings()
security = HTTPBearer(auto_error=False)


def get_session_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    """Bearer header first, then the session cookie."""
    if credentials is not None:
        return credentials.credentials
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def get_current_user(
    token: Optional[str] = Depends(get_session_token),
    repo: UserRepository = Depends(get_user_repository),
) -> User:
    """Resolve the session to a stored user, or 401."""
    return resolve_session(repo, token)


def require_admin(user: User = Depends(get_current_user)) -> User:
    """Require super_admin or editor role."""
    if user.role not in ADMIN_ROLES:
        raise ForbiddenException()
    return user


def require_super_admin(user: User = Depends(get_current_user)) -> User:
    if user.role != UserRole.SUPER_ADMIN.value:
        raise ForbiddenException("Only super admins can manage users")
    return user


def client_ip(request: Request) -> Optional[str]:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None
