"""Default content for a fresh database."""

import structlog
from sqlalchemy.orm import Session

from cybersite.domain.models.navigation_item import NavigationItem
from cybersite.domain.models.site_setting import SiteSetting
from cybersite.infrastructure.repositories.navigation_repository import SQLAlchemyNavigationRepository
from cybersite.infrastructure.repositories.setting_repository import SQLAlchemySiteSettingRepository

logger = structlog.get_logger(__name__)

DEFAULT_NAVIGATION = [
    {"label": "Home", "path": "/", "icon": "home"},
    {"label": "VPS", "path": "/vps", "icon": "server"},
    {"label": "Hosting", "path": "/hosting", "icon": "cloud"},
    {"label": "Domains", "path": "/domains", "icon": "globe"},
    {"label": "Development", "path": "/website-making", "icon": "code"},
    {"label": "Bots", "path": "/telegram-bot", "icon": "message-square"},
    {"label": "Contact", "path": "/contact", "icon": "headphones"},
]

DEFAULT_PUBLIC_SETTINGS = [
    ("site_name", "OnAnimeSeries", "string", "Site name shown in the header and footer"),
    ("company_email", "contact@onanimeseries.com", "string", "Public contact email"),
    ("company_phone", "+91 98765 43210", "string", "Public contact phone"),
    ("company_address", "Mumbai, Maharashtra, India", "string", "Office address"),
    ("client_count", "500+", "string", "Happy clients figure on the home page"),
    ("uptime_sla", "99.9%", "string", "Uptime guarantee on the home page"),
    ("projects_delivered", "1000+", "string", "Projects delivered figure on the home page"),
]


def seed_defaults(db: Session) -> None:
    """Insert default navigation and public settings when their tables are empty."""
    nav_repo = SQLAlchemyNavigationRepository(db, NavigationItem)
    if nav_repo.count() == 0:
        for order, item in enumerate(DEFAULT_NAVIGATION):
            nav_repo.create({**item, "sort_order": order, "is_visible": True})
        logger.info("Seeded navigation", items=len(DEFAULT_NAVIGATION))

    setting_repo = SQLAlchemySiteSettingRepository(db, SiteSetting)
    if setting_repo.count() == 0:
        for key, value, type_, description in DEFAULT_PUBLIC_SETTINGS:
            setting_repo.upsert(
                {"key": key, "value": value, "type": type_, "description": description, "is_public": True}
            )
        logger.info("Seeded site settings", settings=len(DEFAULT_PUBLIC_SETTINGS))
