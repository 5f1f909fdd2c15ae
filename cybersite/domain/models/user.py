"""User domain model — maps to the 'users' table."""

from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func

from cybersite.infrastructure.database import Base


class User(Base):
    __tablename__ = "users"

    # Subject claim from the identity provider
    id = Column(String(255), primary_key=True)
    email = Column(String(255), unique=True, nullable=True, index=True)
    first_name = Column(String(200), nullable=True)
    last_name = Column(String(200), nullable=True)
    profile_image_url = Column(String(1000), nullable=True)
    role = Column(String(50), nullable=False, default="viewer")  # super_admin, editor, viewer
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<User {self.id} {self.email}>"
