"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from cybersite.config import get_settings
from cybersite.infrastructure.database import engine, Base, SessionLocal
from cybersite.core.logging import configure_logging
from cybersite.core.middleware import setup_middleware
from cybersite.core.exceptions import register_exception_handlers

# Import all models so SQLAlchemy knows about them
import cybersite.domain.models  # noqa: F401

# Import routers
from cybersite.interfaces.api.auth import router as auth_router
from cybersite.interfaces.api.pages import router as pages_router
from cybersite.interfaces.api.services import router as services_router
from cybersite.interfaces.api.navigation import router as navigation_router
from cybersite.interfaces.api.settings import router as settings_router
from cybersite.interfaces.api.contact import router as contact_router
from cybersite.interfaces.api.admin.pages import router as admin_pages_router
from cybersite.interfaces.api.admin.services import router as admin_services_router
from cybersite.interfaces.api.admin.service_plans import router as admin_service_plans_router
from cybersite.interfaces.api.admin.navigation import router as admin_navigation_router
from cybersite.interfaces.api.admin.media import router as admin_media_router
from cybersite.interfaces.api.admin.settings import router as admin_settings_router
from cybersite.interfaces.api.admin.contacts import router as admin_contacts_router
from cybersite.interfaces.api.admin.dashboard import router as admin_dashboard_router
from cybersite.interfaces.api.admin.users import router as admin_users_router
from cybersite.interfaces.web.site import router as site_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting Cybersite CMS...", env=settings.ENVIRONMENT)

    # Create DB tables (use Alembic in production)
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    if settings.SEED_DEFAULTS:
        from cybersite.application.services.seed_service import seed_defaults
        db = SessionLocal()
        try:
            seed_defaults(db)
        finally:
            db.close()

    yield

    logger.info("Cybersite CMS stopped")


app = FastAPI(
    title="Cybersite CMS",
    description="Marketing site and content management API for hosting, VPS and web development services",
    version="1.0.0",
    lifespan=lifespan,
)

# Setup Middleware (Correlation ID, Logging)
setup_middleware(app)

register_exception_handlers(app)

# Credentialed CORS needs explicit origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health():
    return {"status": "healthy"}


# Include routers
app.include_router(auth_router)
app.include_router(pages_router)
app.include_router(services_router)
app.include_router(navigation_router)
app.include_router(settings_router)
app.include_router(contact_router)
app.include_router(admin_pages_router)
app.include_router(admin_services_router)
app.include_router(admin_service_plans_router)
app.include_router(admin_navigation_router)
app.include_router(admin_media_router)
app.include_router(admin_settings_router)
app.include_router(admin_contacts_router)
app.include_router(admin_dashboard_router)
app.include_router(admin_users_router)

if settings.STORAGE_BACKEND == "local":
    app.mount(
        settings.MEDIA_URL_PREFIX,
        StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
        name="uploads",
    )

# The catch-all /{slug} page route goes last
app.include_router(site_router)
