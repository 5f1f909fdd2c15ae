from decimal import Decimal

from cybersite.domain.models import ContactSubmission, NavigationItem, SiteSetting


def add_site_chrome(db):
    services = NavigationItem(label="Services", path="/services", sort_order=1)
    db.add(services)
    db.flush()
    db.add_all(
        [
            NavigationItem(label="VPS Hosting", path="/vps", parent_id=services.id, sort_order=1),
            NavigationItem(label="Secret", path="/secret", is_visible=False, sort_order=2),
            SiteSetting(key="site_name", value="Acme Hosting", type="string", is_public=True),
            SiteSetting(key="company_email", value="hello@acme.test", type="string", is_public=True),
            SiteSetting(key="smtp_password", value="hunter2", type="string", is_public=False),
        ]
    )
    db.commit()


def test_home_lists_services_with_site_chrome(client, db, make_service):
    add_site_chrome(db)
    make_service("vps", name="VPS Hosting")
    make_service("legacy", name="Legacy Reseller", is_active=False)

    r = client.get("/")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    html = r.text
    assert "<title>Acme Hosting</title>" in html
    assert 'href="/vps"' in html
    assert "VPS Hosting" in html
    assert "Legacy Reseller" not in html
    assert "Secret" not in html
    assert "hello@acme.test" in html
    assert "hunter2" not in html


def test_published_home_page_replaces_default(client, make_page):
    make_page(
        "home",
        title="Welcome",
        sections=[{"type": "hero", "content": {"title": "Fast VPS in India", "ctaText": "Get Started", "ctaLink": "/vps"}}],
    )

    r = client.get("/")
    assert r.status_code == 200
    assert "Fast VPS in India" in r.text
    assert 'href="/vps"' in r.text


def test_content_page_renders_sections(client, make_page):
    make_page(
        "about",
        title="About Us",
        sections=[
            {"type": "text", "content": {"title": "Our story", "content": "Founded in 2015."}},
            {"type": "features", "content": {"items": [{"title": "NVMe", "description": "Fast disks"}]}},
            {"type": "text", "content": "Plain string body"},
        ],
    )

    r = client.get("/about")
    assert r.status_code == 200
    assert "About Us" in r.text
    assert "Our story" in r.text
    assert "Founded in 2015." in r.text
    assert "NVMe" in r.text
    assert "Plain string body" in r.text


def test_service_page_shows_active_plans(client, make_service, make_plan):
    vps = make_service("vps", name="VPS Hosting")
    make_plan(vps, "Starter", price=Decimal("499.00"), features=["2 GB RAM"], ribbon="Best value")
    make_plan(vps, "Retired", is_active=False)

    r = client.get("/vps")
    assert r.status_code == 200
    assert "Starter" in r.text
    assert "499.00" in r.text
    assert "2 GB RAM" in r.text
    assert "Best value" in r.text
    assert "Retired" not in r.text


def test_unknown_or_draft_slug_renders_not_found(client, make_page):
    make_page("draft", is_published=False)

    for slug in ("draft", "nowhere"):
        r = client.get(f"/{slug}")
        assert r.status_code == 404
        assert "Page not found" in r.text


def test_contact_form_submission(client, count_rows):
    r = client.get("/contact")
    assert r.status_code == 200
    assert '<form method="post" action="/contact">' in r.text

    r = client.post(
        "/contact",
        data={
            "name": "Priya Shah",
            "email": "priya@example.com",
            "subject": "Dedicated server",
            "message": "Please send a quote for a dedicated server.",
        },
        headers={"X-Forwarded-For": "198.51.100.4"},
    )
    assert r.status_code == 200
    assert "Your message has been received" in r.text
    assert count_rows(ContactSubmission, status="new", ip_address="198.51.100.4") == 1


def test_invalid_contact_form_is_redisplayed(client, count_rows):
    r = client.post(
        "/contact",
        data={"name": "Priya Shah", "email": "nope", "subject": "Hi", "message": "Too short"},
    )
    assert r.status_code == 400
    assert 'value="Priya Shah"' in r.text
    assert r.text.count('class="error"') == 3
    assert count_rows(ContactSubmission) == 0
