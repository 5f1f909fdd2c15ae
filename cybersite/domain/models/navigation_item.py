"""Navigation items — the site menu, at most two levels deep."""

from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey
from sqlalchemy.sql import func

from cybersite.infrastructure.database import Base


class NavigationItem(Base):
    __tablename__ = "navigation_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    label = Column(String(200), nullable=False)
    path = Column(String(500), nullable=True)
    external_url = Column(String(1000), nullable=True)
    parent_id = Column(Integer, ForeignKey("navigation_items.id"), nullable=True, index=True)
    sort_order = Column(Integer, nullable=False, default=0)
    is_visible = Column(Boolean, nullable=False, default=True)
    icon = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<NavigationItem {self.label} -> {self.path or self.external_url}>"
