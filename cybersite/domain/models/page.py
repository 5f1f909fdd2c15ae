"""Page domain model — CMS pages rendered on the public site."""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.sql import func

from cybersite.infrastructure.database import Base, json_column_type


class Page(Base):
    __tablename__ = "pages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(300), nullable=False)
    slug = Column(String(200), unique=True, nullable=False, index=True)
    content = Column(json_column_type(), nullable=False)  # {"sections": [{"type": ..., "content": ...}]}

    # SEO
    meta_title = Column(String(300), nullable=True)
    meta_description = Column(Text, nullable=True)
    meta_keywords = Column(String(500), nullable=True)
    og_image = Column(String(1000), nullable=True)

    is_published = Column(Boolean, nullable=False, default=False)
    layout_type = Column(String(50), nullable=False, default="default")
    sort_order = Column(Integer, nullable=False, default=0)

    created_by = Column(String(255), ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Page {self.slug}>"
