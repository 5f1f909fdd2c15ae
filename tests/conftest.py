import os

# Settings are read once at import time, so configure before importing the app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["SEED_DEFAULTS"] = "false"
os.environ["STORAGE_BACKEND"] = "simulated"
os.environ["SUPER_ADMIN_EMAILS"] = "owner@example.com"
os.environ["LOG_LEVEL"] = "WARNING"

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from cybersite.application.services.auth_service import create_access_token
from cybersite.domain.models import ActivityLog, Page, Service, ServicePlan, User
from cybersite.infrastructure.database import Base, SessionLocal, engine
from cybersite.main import app


@pytest.fixture(autouse=True)
def database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client():
    # Not used as a context manager: the lifespan would seed default content
    return TestClient(app)


def make_user(db, user_id, role, email=None):
    user = User(id=user_id, email=email, first_name=user_id.title(), role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def bearer(user_id):
    return {"Authorization": f"Bearer {create_access_token({'sub': user_id})}"}


@pytest.fixture
def editor(db):
    return make_user(db, "editor", "editor", "editor@example.com")


@pytest.fixture
def super_admin(db):
    return make_user(db, "owner", "super_admin", "owner@example.com")


@pytest.fixture
def viewer(db):
    return make_user(db, "viewer", "viewer", "viewer@example.com")


@pytest.fixture
def admin_headers(editor):
    return bearer(editor.id)


@pytest.fixture
def owner_headers(super_admin):
    return bearer(super_admin.id)


@pytest.fixture
def viewer_headers(viewer):
    return bearer(viewer.id)


@pytest.fixture
def count_rows():
    """Count rows through a fresh session so nothing cached in `db` leaks in."""
    def _count(model, **filters):
        session = SessionLocal()
        try:
            return session.query(model).filter_by(**filters).count()
        finally:
            session.close()
    return _count


@pytest.fixture
def make_page(db):
    def _make(slug, title=None, is_published=True, sort_order=0, sections=None):
        page = Page(
            title=title or slug.replace("-", " ").title(),
            slug=slug,
            content={"sections": sections or []},
            is_published=is_published,
            sort_order=sort_order,
        )
        db.add(page)
        db.commit()
        db.refresh(page)
        return page
    return _make


@pytest.fixture
def make_service(db):
    def _make(slug, name=None, is_active=True, sort_order=0):
        service = Service(name=name or slug.upper(), slug=slug, is_active=is_active, sort_order=sort_order)
        db.add(service)
        db.commit()
        db.refresh(service)
        return service
    return _make


@pytest.fixture
def make_plan(db):
    def _make(service, name, price=Decimal("499.00"), is_active=True, sort_order=0, **extra):
        plan = ServicePlan(
            service_id=service.id,
            name=name,
            price=price,
            features=extra.pop("features", []),
            is_active=is_active,
            sort_order=sort_order,
            **extra,
        )
        db.add(plan)
        db.commit()
        db.refresh(plan)
        return plan
    return _make


@pytest.fixture
def activity_logs():
    def _logs(**filters):
        session = SessionLocal()
        try:
            return [
                {
                    "action": log.action,
                    "resource": log.resource,
                    "resource_id": log.resource_id,
                    "user_id": log.user_id,
                    "details": log.details,
                }
                for log in session.query(ActivityLog).filter_by(**filters).order_by(ActivityLog.id).all()
            ]
        finally:
            session.close()
    return _logs
