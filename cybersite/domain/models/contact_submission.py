"""Contact form submissions from the public site."""

from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func

from cybersite.infrastructure.database import Base


class ContactSubmission(Base):
    __tablename__ = "contact_submissions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=True)
    subject = Column(String(300), nullable=True)
    message = Column(Text, nullable=False)
    service_interest = Column(String(200), nullable=True)
    priority = Column(String(20), nullable=False, default="normal")  # low, normal, high, urgent
    status = Column(String(20), nullable=False, default="new", index=True)  # new, in_progress, resolved, closed
    ip_address = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<ContactSubmission {self.email} - {self.status}>"
