"""Admin contact submissions API."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from cybersite.application.services import contact_service
from cybersite.domain.enums import ContactStatus
from cybersite.domain.models.user import User
from cybersite.domain.repositories.contact_repository import ContactRepository
from cybersite.domain.schemas.contact import ContactSubmissionRead, ContactSubmissionUpdate
from cybersite.infrastructure.database import get_db
from cybersite.interfaces.api.audit import audited
from cybersite.interfaces.api.deps import require_admin
from cybersite.interfaces.deps import get_contact_repository

router = APIRouter(prefix="/api/admin/contacts", tags=["Admin: Contacts"], dependencies=[Depends(require_admin)])


@router.get("", response_model=List[ContactSubmissionRead])
def list_contacts(
    status: Optional[ContactStatus] = None,
    repo: ContactRepository = Depends(get_contact_repository),
):
    return contact_service.list_contacts(repo, status.value if status else None)


@router.put("/{contact_id}", response_model=ContactSubmissionRead)
@audited("contact_submission", "update")
def update_contact(
    contact_id: int,
    payload: ContactSubmissionUpdate,
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(require_admin),
    repo: ContactRepository = Depends(get_contact_repository),
):
    return contact_service.update_contact(repo, contact_id, payload)
