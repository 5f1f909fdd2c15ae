"""Public navigation API."""

from typing import List

from fastapi import APIRouter, Depends

from cybersite.application.services import navigation_service
from cybersite.domain.repositories.navigation_repository import NavigationRepository
from cybersite.domain.schemas.navigation import NavigationItemRead
from cybersite.interfaces.deps import get_navigation_repository

router = APIRouter(prefix="/api/navigation", tags=["Navigation"])


@router.get("", response_model=List[NavigationItemRead])
def list_navigation(repo: NavigationRepository = Depends(get_navigation_repository)):
    return navigation_service.list_visible_items(repo)
