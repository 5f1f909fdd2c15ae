"""Pydantic schemas for services and their pricing plans."""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from cybersite.domain.enums import BillingCycle
from cybersite.domain.schemas.base import CamelModel, SLUG_PATTERN, reject_null

Price = Decimal


class ServiceCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    slug: str = Field(..., max_length=200, pattern=SLUG_PATTERN)
    description: Optional[str] = None
    icon: Optional[str] = Field(None, max_length=100)
    color: Optional[str] = Field(None, max_length=100)
    is_active: bool = True
    sort_order: int = 0


class ServiceUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    slug: Optional[str] = Field(None, max_length=200, pattern=SLUG_PATTERN)
    description: Optional[str] = None
    icon: Optional[str] = Field(None, max_length=100)
    color: Optional[str] = Field(None, max_length=100)
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None

    @field_validator("name", "slug", "is_active", "sort_order")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class ServiceRead(CamelModel):
    id: int
    name: str
    slug: str
    description: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    is_active: bool
    sort_order: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ServicePlanFields(CamelModel):
    description: Optional[str] = None
    original_price: Optional[Price] = Field(None, ge=0, max_digits=10, decimal_places=2)
    specifications: Optional[Dict[str, Any]] = None
    ribbon: Optional[str] = Field(None, max_length=100)


class ServicePlanCreate(ServicePlanFields):
    name: str = Field(..., min_length=1, max_length=200)
    price: Price = Field(..., ge=0, max_digits=10, decimal_places=2)
    currency: str = Field("INR", min_length=3, max_length=10)
    billing_cycle: BillingCycle = BillingCycle.MONTHLY.value
    features: List[str] = Field(default_factory=list)
    is_popular: bool = False
    is_active: bool = True
    sort_order: int = 0


class ServicePlanCreateForService(ServicePlanCreate):
    """Plan body for the flat `/service-plans` route, which names its service."""
    service_id: int


class ServicePlanUpdate(ServicePlanFields):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    price: Optional[Price] = Field(None, ge=0, max_digits=10, decimal_places=2)
    currency: Optional[str] = Field(None, min_length=3, max_length=10)
    billing_cycle: Optional[BillingCycle] = None
    features: Optional[List[str]] = None
    is_popular: Optional[bool] = None
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None

    @field_validator("name", "price", "currency", "billing_cycle", "features", "is_popular", "is_active", "sort_order")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class ServicePlanRead(ServicePlanFields):
    id: int
    service_id: int
    name: str
    price: Optional[Price] = None
    currency: str
    billing_cycle: str
    features: List[str] = Field(default_factory=list)
    is_popular: bool
    is_active: bool
    sort_order: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ServiceWithPlans(ServiceRead):
    plans: List[ServicePlanRead] = Field(default_factory=list)
