"""Media library — metadata of uploaded images and videos."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.sql import func

from cybersite.infrastructure.database import Base, json_column_type


class MediaFile(Base):
    __tablename__ = "media_files"

    id = Column(Integer, primary_key=True, autoincrement=True)
    filename = Column(String(500), nullable=False)
    original_name = Column(String(500), nullable=False)
    mime_type = Column(String(100), nullable=False)
    size = Column(Integer, nullable=False)
    path = Column(String(1000), nullable=False)
    url = Column(String(1000), nullable=False)
    alt = Column(String(500), nullable=True)
    caption = Column(Text, nullable=True)
    tags = Column(json_column_type(), nullable=True)
    uploaded_by = Column(String(255), ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<MediaFile {self.original_name} ({self.mime_type})>"
