from decimal import Decimal

from cybersite.domain.models import ContactSubmission, NavigationItem, SiteSetting


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "healthy"}


def test_public_pages_only_published(client, make_page):
    make_page("about", is_published=True, sort_order=2)
    make_page("draft", is_published=False)
    make_page("pricing", is_published=True, sort_order=1)

    r = client.get("/api/pages")
    assert r.status_code == 200
    assert [p["slug"] for p in r.json()] == ["pricing", "about"]
    assert all(p["isPublished"] for p in r.json())


def test_public_page_by_slug(client, make_page):
    make_page("about", sections=[{"type": "text", "content": {"title": "Hi"}}])

    r = client.get("/api/pages/about")
    assert r.status_code == 200
    body = r.json()
    assert body["slug"] == "about"
    assert body["content"]["sections"][0]["type"] == "text"
    assert "metaTitle" in body


def test_unpublished_or_unknown_page_is_404(client, make_page):
    make_page("draft", is_published=False)

    for slug in ("draft", "missing"):
        r = client.get(f"/api/pages/{slug}")
        assert r.status_code == 404
        error = r.json()["error"]
        assert error["code"] == "EntityNotFoundException"
        assert error["path"] == f"/api/pages/{slug}"


def test_public_services_only_active(client, make_service):
    make_service("vps", name="VPS", sort_order=1)
    make_service("hosting", name="Hosting", sort_order=1)
    make_service("legacy", is_active=False)

    r = client.get("/api/services")
    assert r.status_code == 200
    assert [s["slug"] for s in r.json()] == ["hosting", "vps"]


def test_public_service_nests_only_active_plans(client, make_service, make_plan):
    vps = make_service("vps")
    make_plan(vps, "Starter", sort_order=1, features=["1 vCPU", "2 GB RAM"])
    make_plan(vps, "Retired", is_active=False)
    make_plan(vps, "Pro", price=Decimal("999.00"), sort_order=2)

    r = client.get("/api/services/vps")
    assert r.status_code == 200
    body = r.json()
    assert [p["name"] for p in body["plans"]] == ["Starter", "Pro"]
    assert body["plans"][0]["features"] == ["1 vCPU", "2 GB RAM"]
    assert Decimal(body["plans"][1]["price"]) == Decimal("999")
    assert body["plans"][0]["currency"] == "INR"


def test_inactive_or_unknown_service_is_404(client, make_service):
    make_service("legacy", is_active=False)

    assert client.get("/api/services/legacy").status_code == 404
    assert client.get("/api/services/nope").status_code == 404


def test_public_navigation_only_visible(client, db):
    db.add_all(
        [
            NavigationItem(label="Home", path="/", sort_order=0),
            NavigationItem(label="Hidden", path="/hidden", sort_order=1, is_visible=False),
            NavigationItem(label="Blog", external_url="https://blog.example.com", sort_order=2),
        ]
    )
    db.commit()

    r = client.get("/api/navigation")
    assert r.status_code == 200
    assert [n["label"] for n in r.json()] == ["Home", "Blog"]
    assert r.json()[1]["externalUrl"] == "https://blog.example.com"


def test_public_settings_exclude_private_and_coerce(client, db):
    db.add_all(
        [
            SiteSetting(key="site_name", value="OnAnimeSeries", type="string", is_public=True),
            SiteSetting(key="max_clients", value="500", type="number", is_public=True),
            SiteSetting(key="maintenance", value="false", type="boolean", is_public=True),
            SiteSetting(key="smtp_password", value="hunter2", type="string", is_public=False),
        ]
    )
    db.commit()

    r = client.get("/api/settings/public")
    assert r.status_code == 200
    assert r.json() == {"site_name": "OnAnimeSeries", "max_clients": 500, "maintenance": False}


def test_public_settings_skip_values_that_do_not_match_type(client, db):
    db.add_all(
        [
            SiteSetting(key="broken", value="not a number", type="number", is_public=True),
            SiteSetting(key="ok", value=3, type="number", is_public=True),
        ]
    )
    db.commit()

    assert client.get("/api/settings/public").json() == {"ok": 3}


def test_contact_submission_applies_defaults(client, db):
    r = client.post(
        "/api/contact",
        json={"name": "Jane", "email": "jane@x.com", "subject": "Hello world", "message": "Need a VPS quote please"},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Contact submission received"
    assert isinstance(body["id"], int)

    stored = db.get(ContactSubmission, body["id"])
    assert stored.status == "new"
    assert stored.priority == "normal"
    assert stored.ip_address == "testclient"


def test_contact_submission_cannot_set_status(client, db):
    r = client.post(
        "/api/contact",
        json={
            "name": "Jane",
            "email": "jane@x.com",
            "subject": "Hello world",
            "message": "Need a VPS quote please",
            "status": "resolved",
            "priority": "urgent",
            "serviceInterest": "VPS",
        },
    )
    assert r.status_code == 200
    stored = db.get(ContactSubmission, r.json()["id"])
    assert stored.status == "new"
    assert stored.priority == "urgent"
    assert stored.service_interest == "VPS"


def test_contact_validation_errors(client, count_rows):
    r = client.post(
        "/api/contact",
        json={"name": "J", "email": "not-an-email", "subject": "Hi", "message": "short"},
    )
    assert r.status_code == 400
    error = r.json()["error"]
    assert error["code"] == "ValidationError"
    fields = {e["field"] for e in error["details"]["errors"]}
    assert {"name", "email", "subject", "message"} <= fields
    assert count_rows(ContactSubmission) == 0


def test_unknown_api_route_uses_error_envelope(client):
    r = client.get("/api/does/not/exist")
    assert r.status_code == 404
    assert r.json()["error"]["path"] == "/api/does/not/exist"


def test_request_id_header_is_returned(client):
    r = client.get("/health")
    assert r.headers.get("X-Request-ID")
