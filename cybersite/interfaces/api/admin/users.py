"""Admin users API — super admins only."""

from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from cybersite.application.services import user_service
from cybersite.domain.models.user import User
from cybersite.domain.repositories.user_repository import UserRepository
from cybersite.domain.schemas.auth import RoleUpdate, UserRead
from cybersite.infrastructure.database import get_db
from cybersite.interfaces.api.audit import audited
from cybersite.interfaces.api.deps import require_super_admin
from cybersite.interfaces.deps import get_user_repository

router = APIRouter(prefix="/api/admin/users", tags=["Admin: Users"], dependencies=[Depends(require_super_admin)])


@router.get("", response_model=List[UserRead])
def list_users(repo: UserRepository = Depends(get_user_repository)):
    return user_service.list_users(repo)


@router.put("/{user_id}/role", response_model=UserRead)
@audited("user", "update")
def update_role(
    user_id: str,
    payload: RoleUpdate,
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(require_super_admin),
    repo: UserRepository = Depends(get_user_repository),
):
    return user_service.change_role(repo, user, user_id, payload.role)
