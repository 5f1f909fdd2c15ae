"""Site settings — typed key/value store, optionally exposed to the public site."""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.sql import func

from cybersite.infrastructure.database import Base, json_column_type


class SiteSetting(Base):
    __tablename__ = "site_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(200), unique=True, nullable=False, index=True)
    value = Column(json_column_type(), nullable=True)
    type = Column(String(20), nullable=False, default="string")  # string, number, boolean, object, array
    description = Column(Text, nullable=True)
    is_public = Column(Boolean, nullable=False, default=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_by = Column(String(255), ForeignKey("users.id"), nullable=True)

    def __repr__(self):
        return f"<SiteSetting {self.key} ({self.type})>"
