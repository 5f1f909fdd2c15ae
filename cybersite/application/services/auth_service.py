"""Auth service — identity-provider token exchange and session tokens."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import structlog
from jose import JWTError, jwt

from cybersite.config import get_settings
from cybersite.core.exceptions import UnauthorizedException
from cybersite.domain.enums import UserRole
from cybersite.domain.models.user import User
from cybersite.domain.repositories.user_repository import UserRepository

settings = get_settings()
logger = structlog.get_logger(__name__)

# Marks tokens this service issued; only provider tokens may be exchanged
SESSION_TOKEN_TYPE = "session"


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.SESSION_MAX_AGE_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
        )
        return payload
    except JWTError:
        return None


def upsert_user_from_claims(repo: UserRepository, claims: Dict[str, Any]) -> User:
    """Create the user on first sign-in or refresh its profile from the provider claims."""
    subject = claims.get("sub")
    if not subject:
        raise UnauthorizedException("Token has no subject")

    email = claims.get("email")
    role = UserRole.VIEWER.value
    if email and email.lower() in settings.super_admin_emails:
        role = UserRole.SUPER_ADMIN.value

    user = repo.upsert(
        {
            "id": str(subject),
            "email": email,
            "first_name": claims.get("first_name"),
            "last_name": claims.get("last_name"),
            "profile_image_url": claims.get("profile_image_url"),
            "role": role,
        }
    )
    logger.info("User signed in", user_id=user.id, role=user.role)
    return user


def open_session(repo: UserRepository, provider_token: str) -> tuple[User, str]:
    """Exchange an identity-provider token for the user and a session token."""
    claims = decode_access_token(provider_token)
    if claims is None:
        raise UnauthorizedException("Invalid or expired token")
    if claims.get("typ") == SESSION_TOKEN_TYPE:
        raise UnauthorizedException("Session tokens cannot be exchanged")

    user = upsert_user_from_claims(repo, claims)
    return user, create_access_token({"sub": user.id, "typ": SESSION_TOKEN_TYPE})


def resolve_session(repo: UserRepository, token: Optional[str]) -> User:
    if not token:
        raise UnauthorizedException("Not authenticated")

    payload = decode_access_token(token)
    if payload is None:
        raise UnauthorizedException("Invalid or expired session")

    user_id = payload.get("sub")
    if user_id is None:
        raise UnauthorizedException("Invalid session")

    user = repo.get_by_id(str(user_id))
    if user is None:
        raise UnauthorizedException("User not found")
    return user
