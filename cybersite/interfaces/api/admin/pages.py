"""Admin pages API — CRUD for CMS pages."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from cybersite.application.services import page_service
from cybersite.domain.models.user import User
from cybersite.domain.repositories.page_repository import PageRepository
from cybersite.domain.schemas.page import PageCreate, PageRead, PageUpdate
from cybersite.infrastructure.database import get_db
from cybersite.interfaces.api.audit import audited
from cybersite.interfaces.api.deps import require_admin
from cybersite.interfaces.deps import get_page_repository

router = APIRouter(prefix="/api/admin/pages", tags=["Admin: Pages"], dependencies=[Depends(require_admin)])


def describe_page(page) -> Dict[str, Any]:
    return {"title": page.title, "slug": page.slug}


@router.get("", response_model=List[PageRead])
def list_pages(repo: PageRepository = Depends(get_page_repository)):
    return page_service.list_pages(repo)


@router.get("/section-templates")
def section_templates() -> Dict[str, Any]:
    return page_service.SECTION_TEMPLATES


@router.get("/{page_id}", response_model=PageRead)
def get_page(page_id: int, repo: PageRepository = Depends(get_page_repository)):
    return page_service.get_page(repo, page_id)


@router.post("", response_model=PageRead)
@audited("page", "create", describe=describe_page)
def create_page(
    payload: PageCreate,
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(require_admin),
    repo: PageRepository = Depends(get_page_repository),
):
    return page_service.create_page(repo, payload, user.id)


@router.put("/{page_id}", response_model=PageRead)
@audited("page", "update")
def update_page(
    page_id: int,
    payload: PageUpdate,
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(require_admin),
    repo: PageRepository = Depends(get_page_repository),
):
    return page_service.update_page(repo, page_id, payload)


@router.delete("/{page_id}")
@audited("page", "delete", describe=describe_page)
def delete_page(
    page_id: int,
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(require_admin),
    repo: PageRepository = Depends(get_page_repository),
):
    return page_service.delete_page(repo, page_id)
