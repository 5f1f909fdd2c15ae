"""Import all models so SQLAlchemy metadata knows about every table."""

from cybersite.domain.models.user import User
from cybersite.domain.models.page import Page
from cybersite.domain.models.service import Service, ServicePlan
from cybersite.domain.models.media_file import MediaFile
from cybersite.domain.models.site_setting import SiteSetting
from cybersite.domain.models.navigation_item import NavigationItem
from cybersite.domain.models.contact_submission import ContactSubmission
from cybersite.domain.models.activity_log import ActivityLog

__all__ = [
    "User",
    "Page",
    "Service",
    "ServicePlan",
    "MediaFile",
    "SiteSetting",
    "NavigationItem",
    "ContactSubmission",
    "ActivityLog",
]
