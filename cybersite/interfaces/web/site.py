"""Public website — server-rendered pages built from CMS content."""

from pathlib import Path
from typing import Any, Dict

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from cybersite.application.services import (
    catalog_service,
    contact_service,
    navigation_service,
    page_service,
    setting_service,
)
from cybersite.core.exceptions import EntityNotFoundException
from cybersite.domain.repositories.contact_repository import ContactRepository
from cybersite.domain.repositories.navigation_repository import NavigationRepository
from cybersite.domain.repositories.page_repository import PageRepository
from cybersite.domain.repositories.service_repository import ServicePlanRepository, ServiceRepository
from cybersite.domain.repositories.setting_repository import SiteSettingRepository
from cybersite.domain.schemas.contact import ContactSubmissionCreate
from cybersite.interfaces.api.deps import client_ip
from cybersite.interfaces.deps import (
    get_contact_repository,
    get_navigation_repository,
    get_page_repository,
    get_service_plan_repository,
    get_service_repository,
    get_setting_repository,
)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATE_DIR))

router = APIRouter(tags=["Website"], include_in_schema=False)

CONTACT_FIELDS = ("name", "email", "phone", "subject", "message", "service_interest")


def site_context(
    nav_repo: NavigationRepository = Depends(get_navigation_repository),
    setting_repo: SiteSettingRepository = Depends(get_setting_repository),
) -> Dict[str, Any]:
    """Navigation and public settings shared by every page."""
    return {
        "navigation": navigation_service.build_tree(navigation_service.list_visible_items(nav_repo)),
        "site": setting_service.get_public_settings(setting_repo),
    }


def render(request: Request, template: str, context: Dict[str, Any], status_code: int = 200) -> HTMLResponse:
    return templates.TemplateResponse(request, template, context, status_code=status_code)


@router.get("/", response_class=HTMLResponse)
def home(
    request: Request,
    context: Dict[str, Any] = Depends(site_context),
    page_repo: PageRepository = Depends(get_page_repository),
    service_repo: ServiceRepository = Depends(get_service_repository),
):
    home_page = page_repo.get_by_slug("home")
    if home_page is not None and home_page.is_published:
        return render(request, "page.html", {**context, "page": home_page})
    return render(
        request,
        "home.html",
        {**context, "services": catalog_service.list_public_services(service_repo)},
    )


@router.get("/contact", response_class=HTMLResponse)
def contact_form(
    request: Request,
    context: Dict[str, Any] = Depends(site_context),
    service_repo: ServiceRepository = Depends(get_service_repository),
):
    return render(
        request,
        "contact.html",
        {**context, "services": catalog_service.list_public_services(service_repo), "form": {}, "errors": {}},
    )


@router.post("/contact", response_class=HTMLResponse)
def submit_contact_form(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    subject: str = Form(""),
    message: str = Form(""),
    service_interest: str = Form(""),
    context: Dict[str, Any] = Depends(site_context),
    service_repo: ServiceRepository = Depends(get_service_repository),
    contact_repo: ContactRepository = Depends(get_contact_repository),
):
    values = (name, email, phone, subject, message, service_interest)
    form = {field: value.strip() for field, value in zip(CONTACT_FIELDS, values)}
    services = catalog_service.list_public_services(service_repo)

    try:
        payload = ContactSubmissionCreate(**{k: v for k, v in form.items() if v})
    except ValidationError as exc:
        errors = {str(err["loc"][0]): err["msg"] for err in exc.errors() if err.get("loc")}
        return render(
            request,
            "contact.html",
            {**context, "services": services, "form": form, "errors": errors},
            status_code=400,
        )

    contact_service.submit_contact(contact_repo, payload, client_ip(request))
    return render(request, "contact.html", {**context, "services": services, "submitted": True, "form": {}, "errors": {}})


@router.get("/{slug}", response_class=HTMLResponse)
def content_page(
    slug: str,
    request: Request,
    context: Dict[str, Any] = Depends(site_context),
    page_repo: PageRepository = Depends(get_page_repository),
    service_repo: ServiceRepository = Depends(get_service_repository),
    plan_repo: ServicePlanRepository = Depends(get_service_plan_repository),
):
    try:
        page = page_service.get_public_page(page_repo, slug)
        return render(request, "page.html", {**context, "page": page})
    except EntityNotFoundException:
        pass

    try:
        service = catalog_service.get_public_service(service_repo, plan_repo, slug)
        return render(request, "service.html", {**context, "service": service})
    except EntityNotFoundException:
        return render(request, "not_found.html", {**context, "slug": slug}, status_code=404)
