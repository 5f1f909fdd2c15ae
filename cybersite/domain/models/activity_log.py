"""Activity log — append-only audit trail of admin mutations."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.sql import func

from cybersite.infrastructure.database import Base, json_column_type


class ActivityLog(Base):
    __tablename__ = "activity_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(255), ForeignKey("users.id"), nullable=True, index=True)
    action = Column(String(20), nullable=False)  # create, update, delete
    resource = Column(String(100), nullable=False)  # page, service, service_plan...
    resource_id = Column(String(255), nullable=True)
    details = Column(json_column_type(), nullable=True)
    ip_address = Column(String(100), nullable=True)
    user_agent = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    def __repr__(self):
        return f"<ActivityLog {self.action} {self.resource}#{self.resource_id}>"
