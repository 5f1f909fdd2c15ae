"""Admin navigation API."""

from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from cybersite.application.services import navigation_service
from cybersite.domain.models.user import User
from cybersite.domain.repositories.navigation_repository import NavigationRepository
from cybersite.domain.schemas.navigation import (
    NavigationItemCreate,
    NavigationItemRead,
    NavigationItemUpdate,
)
from cybersite.infrastructure.database import get_db
from cybersite.interfaces.api.audit import audited
from cybersite.interfaces.api.deps import require_admin
from cybersite.interfaces.deps import get_navigation_repository

router = APIRouter(prefix="/api/admin/navigation", tags=["Admin: Navigation"], dependencies=[Depends(require_admin)])


def describe_item(item):
    return {"label": item.label, "path": item.path, "externalUrl": item.external_url}


@router.get("", response_model=List[NavigationItemRead])
def list_navigation(repo: NavigationRepository = Depends(get_navigation_repository)):
    return navigation_service.list_items(repo)


@router.post("", response_model=NavigationItemRead)
@audited("navigation_item", "create", describe=describe_item)
def create_item(
    payload: NavigationItemCreate,
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(require_admin),
    repo: NavigationRepository = Depends(get_navigation_repository),
):
    return navigation_service.create_item(repo, payload)


@router.put("/{item_id}", response_model=NavigationItemRead)
@audited("navigation_item", "update")
def update_item(
    item_id: int,
    payload: NavigationItemUpdate,
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(require_admin),
    repo: NavigationRepository = Depends(get_navigation_repository),
):
    return navigation_service.update_item(repo, item_id, payload)


@router.delete("/{item_id}")
@audited("navigation_item", "delete", describe=describe_item)
def delete_item(
    item_id: int,
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(require_admin),
    repo: NavigationRepository = Depends(get_navigation_repository),
):
    return navigation_service.delete_item(repo, item_id)
