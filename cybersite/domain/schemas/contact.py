"""Pydantic schemas for contact submissions."""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from cybersite.domain.enums import ContactPriority, ContactStatus
from cybersite.domain.schemas.base import CamelModel, reject_null


class ContactSubmissionCreate(CamelModel):
    name: str = Field(..., min_length=2, max_length=200)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=50)
    subject: str = Field(..., min_length=5, max_length=300)
    message: str = Field(..., min_length=10, max_length=10000)
    service_interest: Optional[str] = Field(None, max_length=200)
    priority: ContactPriority = ContactPriority.NORMAL.value


class ContactSubmissionUpdate(CamelModel):
    status: Optional[ContactStatus] = None
    priority: Optional[ContactPriority] = None

    @field_validator("status", "priority")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class ContactSubmissionRead(CamelModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    subject: Optional[str] = None
    message: str
    service_interest: Optional[str] = None
    priority: str
    status: str
    ip_address: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ContactReceipt(CamelModel):
    message: str = "Contact submission received"
    id: int
