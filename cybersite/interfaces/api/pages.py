"""Public pages API — published pages only."""

from typing import List

from fastapi import APIRouter, Depends

from cybersite.application.services import page_service
from cybersite.domain.repositories.page_repository import PageRepository
from cybersite.domain.schemas.page import PageRead
from cybersite.interfaces.deps import get_page_repository

router = APIRouter(prefix="/api/pages", tags=["Pages"])


@router.get("", response_model=List[PageRead])
def list_pages(repo: PageRepository = Depends(get_page_repository)):
    return page_service.list_public_pages(repo)


@router.get("/{slug}", response_model=PageRead)
def get_page(slug: str, repo: PageRepository = Depends(get_page_repository)):
    return page_service.get_public_page(repo, slug)
