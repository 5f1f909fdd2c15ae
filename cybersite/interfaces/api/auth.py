"""Auth API routes — session exchange, logout and current user."""

from fastapi import APIRouter, Depends, Response

from cybersite.application.services.auth_service import open_session
from cybersite.config import get_settings
from cybersite.domain.models.user import User
from cybersite.domain.repositories.user_repository import UserRepository
from cybersite.domain.schemas.auth import SessionRequest, UserRead
from cybersite.interfaces.api.deps import get_current_user
from cybersite.interfaces.deps import get_user_repository

settings = get_settings()
router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/session", response_model=UserRead)
def create_session(
    payload: SessionRequest,
    response: Response,
    repo: UserRepository = Depends(get_user_repository),
):
    user, session_token = open_session(repo, payload.token)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session_token,
        max_age=settings.SESSION_MAX_AGE_MINUTES * 60,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    return user


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": "Logged out"}


@router.get("/user", response_model=UserRead)
def current_user(user: User = Depends(get_current_user)):
    return user
