"""Service and ServicePlan domain models — the hosting catalogue."""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, Numeric
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from cybersite.infrastructure.database import Base, json_column_type


class Service(Base):
    __tablename__ = "services"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    slug = Column(String(200), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=True)
    icon = Column(String(100), nullable=True)
    color = Column(String(100), nullable=True)  # CSS color value
    is_active = Column(Boolean, nullable=False, default=True)
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    plans = relationship("ServicePlan", back_populates="service", lazy="select")

    def __repr__(self):
        return f"<Service {self.slug}>"


class ServicePlan(Base):
    __tablename__ = "service_plans"

    id = Column(Integer, primary_key=True, autoincrement=True)
    service_id = Column(Integer, ForeignKey("services.id"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=True)
    original_price = Column(Numeric(10, 2), nullable=True)
    currency = Column(String(10), nullable=False, default="INR")
    billing_cycle = Column(String(20), nullable=False, default="monthly")  # monthly, yearly, one-time
    features = Column(json_column_type(), nullable=False, default=list)
    specifications = Column(json_column_type(), nullable=True)  # cpu, ram, storage, bandwidth...
    is_popular = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    sort_order = Column(Integer, nullable=False, default=0)
    ribbon = Column(String(100), nullable=True)  # "POPULAR", "BEST VALUE"
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    service = relationship("Service", back_populates="plans")

    def __repr__(self):
        return f"<ServicePlan {self.name} service={self.service_id}>"
