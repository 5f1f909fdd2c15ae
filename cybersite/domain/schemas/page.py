"""Pydantic schemas for CMS pages."""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import Field, field_validator

from cybersite.domain.enums import LayoutType
from cybersite.domain.schemas.base import CamelModel, SLUG_PATTERN, reject_null


class PageSection(CamelModel):
    type: str = Field(..., min_length=1, max_length=50)
    content: Any = Field(default_factory=dict)


class PageContent(CamelModel):
    sections: List[PageSection] = Field(default_factory=list)


class PageBase(CamelModel):
    meta_title: Optional[str] = Field(None, max_length=300)
    meta_description: Optional[str] = None
    meta_keywords: Optional[str] = Field(None, max_length=500)
    og_image: Optional[str] = Field(None, max_length=1000)


class PageCreate(PageBase):
    title: str = Field(..., min_length=1, max_length=300)
    slug: Optional[str] = Field(None, max_length=200, pattern=SLUG_PATTERN)
    content: PageContent = Field(default_factory=PageContent)
    is_published: bool = False
    layout_type: LayoutType = LayoutType.DEFAULT.value
    sort_order: int = 0


class PageUpdate(PageBase):
    title: Optional[str] = Field(None, min_length=1, max_length=300)
    slug: Optional[str] = Field(None, max_length=200, pattern=SLUG_PATTERN)
    content: Optional[PageContent] = None
    is_published: Optional[bool] = None
    layout_type: Optional[LayoutType] = None
    sort_order: Optional[int] = None

    @field_validator("title", "slug", "content", "is_published", "layout_type", "sort_order")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class PageRead(PageBase):
    id: int
    title: str
    slug: str
    content: PageContent
    is_published: bool
    layout_type: str
    sort_order: int
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
