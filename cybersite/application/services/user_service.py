"""User service — role management for super admins."""

from typing import List

import structlog

from cybersite.core.exceptions import BadRequestException, EntityNotFoundException
from cybersite.domain.enums import UserRole
from cybersite.domain.models.user import User
from cybersite.domain.repositories.user_repository import UserRepository

logger = structlog.get_logger(__name__)


def list_users(repo: UserRepository) -> List[User]:
    return repo.list_ordered()


def change_role(repo: UserRepository, actor: User, user_id: str, role: str) -> User:
    user = repo.get_by_id(user_id)
    if user is None:
        raise EntityNotFoundException("User not found")
    if user.id == actor.id and role != UserRole.SUPER_ADMIN.value:
        raise BadRequestException("You cannot remove your own super admin role")

    previous = user.role
    user = repo.set_role(user, role)
    logger.info("User role changed", user_id=user.id, previous=previous, role=role, by=actor.id)
    return user
