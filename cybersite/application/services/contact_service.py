"""Contact service — public enquiries and their triage."""

from typing import List, Optional

import structlog

from cybersite.core.exceptions import EntityNotFoundException
from cybersite.domain.enums import ContactStatus
from cybersite.domain.models.contact_submission import ContactSubmission
from cybersite.domain.repositories.contact_repository import ContactRepository
from cybersite.domain.schemas.contact import ContactSubmissionCreate, ContactSubmissionUpdate

logger = structlog.get_logger(__name__)


def submit_contact(
    repo: ContactRepository, data: ContactSubmissionCreate, ip_address: Optional[str] = None
) -> ContactSubmission:
    values = data.model_dump()
    values.update(status=ContactStatus.NEW.value, ip_address=ip_address)
    submission = repo.create(values)
    logger.info("Contact submission received", contact_id=submission.id, priority=submission.priority)
    return submission


def list_contacts(repo: ContactRepository, status: Optional[str] = None) -> List[ContactSubmission]:
    return repo.list_recent(status)


def update_contact(repo: ContactRepository, contact_id: int, data: ContactSubmissionUpdate) -> ContactSubmission:
    submission = repo.get_by_id(contact_id)
    if submission is None:
        raise EntityNotFoundException("Contact submission not found")
    return repo.update(submission, data.model_dump(exclude_unset=True))
