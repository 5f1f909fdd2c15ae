"""
API Dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from cybersite.domain.models.contact_submission import ContactSubmission
from cybersite.domain.models.media_file import MediaFile
from cybersite.domain.models.navigation_item import NavigationItem
from cybersite.domain.models.page import Page
from cybersite.domain.models.service import Service, ServicePlan
from cybersite.domain.models.site_setting import SiteSetting
from cybersite.domain.repositories.activity_log_repository import ActivityLogRepository
from cybersite.domain.repositories.contact_repository import ContactRepository
from cybersite.domain.repositories.media_repository import MediaRepository
from cybersite.domain.repositories.navigation_repository import NavigationRepository
from cybersite.domain.repositories.page_repository import PageRepository
from cybersite.domain.repositories.service_repository import ServicePlanRepository, ServiceRepository
from cybersite.domain.repositories.setting_repository import SiteSettingRepository
from cybersite.domain.repositories.user_repository import UserRepository
from cybersite.infrastructure.database import get_db
from cybersite.infrastructure.repositories.activity_log_repository import SQLAlchemyActivityLogRepository
from cybersite.infrastructure.repositories.contact_repository import SQLAlchemyContactRepository
from cybersite.infrastructure.repositories.media_repository import SQLAlchemyMediaRepository
from cybersite.infrastructure.repositories.navigation_repository import SQLAlchemyNavigationRepository
from cybersite.infrastructure.repositories.page_repository import SQLAlchemyPageRepository
from cybersite.infrastructure.repositories.service_repository import (
    SQLAlchemyServicePlanRepository,
    SQLAlchemyServiceRepository,
)
from cybersite.infrastructure.repositories.setting_repository import SQLAlchemySiteSettingRepository
from cybersite.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from cybersite.infrastructure.storage import StorageProvider, get_storage_provider


def get_page_repository(db: Session = Depends(get_db)) -> PageRepository:
    """Get page repository instance."""
    return SQLAlchemyPageRepository(db, Page)


def get_service_repository(db: Session = Depends(get_db)) -> ServiceRepository:
    """Get service repository instance."""
    return SQLAlchemyServiceRepository(db, Service)


def get_service_plan_repository(db: Session = Depends(get_db)) -> ServicePlanRepository:
    return SQLAlchemyServicePlanRepository(db, ServicePlan)


def get_navigation_repository(db: Session = Depends(get_db)) -> NavigationRepository:
    return SQLAlchemyNavigationRepository(db, NavigationItem)


def get_media_repository(db: Session = Depends(get_db)) -> MediaRepository:
    return SQLAlchemyMediaRepository(db, MediaFile)


def get_setting_repository(db: Session = Depends(get_db)) -> SiteSettingRepository:
    return SQLAlchemySiteSettingRepository(db, SiteSetting)


def get_contact_repository(db: Session = Depends(get_db)) -> ContactRepository:
    return SQLAlchemyContactRepository(db, ContactSubmission)


def get_activity_log_repository(db: Session = Depends(get_db)) -> ActivityLogRepository:
    return SQLAlchemyActivityLogRepository(db)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return SQLAlchemyUserRepository(db)


def get_storage() -> StorageProvider:
    """Get the configured media storage provider."""
    return get_storage_provider()
