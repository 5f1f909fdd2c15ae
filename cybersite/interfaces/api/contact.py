"""Public contact form API."""

from fastapi import APIRouter, Depends, Request

from cybersite.application.services import contact_service
from cybersite.domain.repositories.contact_repository import ContactRepository
from cybersite.domain.schemas.contact import ContactReceipt, ContactSubmissionCreate
from cybersite.interfaces.api.deps import client_ip
from cybersite.interfaces.deps import get_contact_repository

router = APIRouter(prefix="/api/contact", tags=["Contact"])


@router.post("", response_model=ContactReceipt)
def submit_contact(
    payload: ContactSubmissionCreate,
    request: Request,
    repo: ContactRepository = Depends(get_contact_repository),
):
    submission = contact_service.submit_contact(repo, payload, client_ip(request))
    return ContactReceipt(id=submission.id)
