"""Page service — CMS page rules: public visibility, slugs and section templates."""

import re
from typing import List, Optional

import structlog

from cybersite.core.exceptions import BadRequestException, ConflictException, EntityNotFoundException
from cybersite.domain.models.page import Page
from cybersite.domain.repositories.page_repository import PageRepository
from cybersite.domain.schemas.page import PageCreate, PageUpdate

logger = structlog.get_logger(__name__)

# Starting content for each section type offered by the page editor
SECTION_TEMPLATES = {
    "hero": {
        "title": "Hero Title",
        "subtitle": "Hero subtitle text",
        "backgroundImage": "",
        "ctaText": "Get Started",
        "ctaLink": "#",
    },
    "text": {
        "title": "Section Title",
        "content": "Your content here...",
    },
    "features": {
        "title": "Features",
        "items": [
            {"icon": "fa-star", "title": "Feature 1", "description": "Feature description"},
        ],
    },
    "pricing": {
        "title": "Pricing Plans",
        "plans": [],
    },
}


def slugify(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")


def list_public_pages(repo: PageRepository) -> List[Page]:
    return repo.list_ordered(published_only=True)


def get_public_page(repo: PageRepository, slug: str) -> Page:
    page = repo.get_by_slug(slug)
    if page is None or not page.is_published:
        raise EntityNotFoundException("Page not found")
    return page


def list_pages(repo: PageRepository) -> List[Page]:
    return repo.list_ordered()


def get_page(repo: PageRepository, page_id: int) -> Page:
    page = repo.get_by_id(page_id)
    if page is None:
        raise EntityNotFoundException("Page not found")
    return page


def _ensure_slug_free(repo: PageRepository, slug: str, page_id: Optional[int] = None) -> None:
    existing = repo.get_by_slug(slug)
    if existing is not None and existing.id != page_id:
        raise ConflictException(f"A page with slug '{slug}' already exists", {"slug": slug})


def create_page(repo: PageRepository, data: PageCreate, user_id: Optional[str] = None) -> Page:
    values = data.model_dump()
    slug = values.get("slug") or slugify(data.title)
    if not slug:
        raise BadRequestException("Cannot derive a slug from the title; provide one explicitly")

    _ensure_slug_free(repo, slug)
    values.update(slug=slug, created_by=user_id)

    page = repo.create(values)
    logger.info("Page created", page_id=page.id, slug=page.slug)
    return page


def update_page(repo: PageRepository, page_id: int, data: PageUpdate) -> Page:
    page = get_page(repo, page_id)
    changes = data.model_dump(exclude_unset=True)
    if "slug" in changes and changes["slug"] != page.slug:
        _ensure_slug_free(repo, changes["slug"], page_id)
    return repo.update(page, changes)


def delete_page(repo: PageRepository, page_id: int) -> Page:
    page = get_page(repo, page_id)
    slug = page.slug
    repo.delete(page.id)
    logger.info("Page deleted", page_id=page_id, slug=slug)
    return page
