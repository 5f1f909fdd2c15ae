from cybersite.domain.models import ActivityLog, Page


def new_page(**overrides):
    body = {
        "title": "About Us",
        "slug": "about",
        "content": {"sections": [{"type": "text", "content": {"title": "Who we are"}}]},
        "isPublished": True,
        "layoutType": "cards",
        "metaTitle": "About",
    }
    body.update(overrides)
    return body


def test_create_page_records_one_activity_log(client, admin_headers, activity_logs):
    r = client.post("/api/admin/pages", json=new_page(), headers=admin_headers)
    assert r.status_code == 200
    page = r.json()
    assert page["slug"] == "about"
    assert page["layoutType"] == "cards"
    assert page["createdBy"] == "editor"

    logs = activity_logs()
    assert len(logs) == 1
    assert logs[0]["action"] == "create"
    assert logs[0]["resource"] == "page"
    assert logs[0]["resource_id"] == str(page["id"])
    assert logs[0]["user_id"] == "editor"
    assert logs[0]["details"] == {"title": "About Us", "slug": "about"}


def test_slug_is_derived_from_title(client, admin_headers):
    r = client.post(
        "/api/admin/pages",
        json={"title": "VPS Hosting & Cloud!"},
        headers=admin_headers,
    )
    assert r.status_code == 200
    assert r.json()["slug"] == "vps-hosting-cloud"
    assert r.json()["isPublished"] is False
    assert r.json()["layoutType"] == "default"


def test_duplicate_slug_conflicts_and_leaves_original(client, admin_headers, make_page, db, activity_logs):
    original = make_page("about", title="Original")

    r = client.post("/api/admin/pages", json=new_page(title="Impostor"), headers=admin_headers)
    assert r.status_code == 409
    assert r.json()["error"]["code"] == "ConflictException"

    db.expire_all()
    assert db.get(Page, original.id).title == "Original"
    assert db.query(Page).count() == 1
    assert activity_logs() == []


def test_update_to_taken_slug_conflicts(client, admin_headers, make_page, db):
    make_page("about")
    other = make_page("team")

    r = client.put(f"/api/admin/pages/{other.id}", json={"slug": "about"}, headers=admin_headers)
    assert r.status_code == 409
    db.expire_all()
    assert db.get(Page, other.id).slug == "team"


def test_unpublishing_removes_page_from_public_list(client, admin_headers, make_page, activity_logs):
    pages = [make_page(f"page-{i}") for i in range(5)]
    target = pages[-1]
    assert target.slug in [p["slug"] for p in client.get("/api/pages").json()]

    r = client.put(f"/api/admin/pages/{target.id}", json={"isPublished": False}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["isPublished"] is False

    assert target.slug not in [p["slug"] for p in client.get("/api/pages").json()]
    assert client.get(f"/api/pages/{target.slug}").status_code == 404

    logs = activity_logs(action="update")
    assert len(logs) == 1
    assert logs[0]["resource_id"] == str(target.id)
    assert logs[0]["details"] == {"changes": {"is_published": False}}


def test_update_refreshes_updated_at_and_ignores_protected_fields(client, admin_headers, make_page):
    page = make_page("about")
    r = client.put(
        f"/api/admin/pages/{page.id}",
        json={"title": "New title", "id": 999, "createdAt": "2000-01-01T00:00:00"},
        headers=admin_headers,
    )
    assert r.status_code == 200
    assert r.json()["id"] == page.id
    assert r.json()["title"] == "New title"
    assert r.json()["updatedAt"] is not None


def test_update_rejects_null_for_required_field(client, admin_headers, make_page):
    page = make_page("about")
    r = client.put(f"/api/admin/pages/{page.id}", json={"title": None}, headers=admin_headers)
    assert r.status_code == 400


def test_invalid_slug_is_validation_error(client, admin_headers, count_rows):
    r = client.post("/api/admin/pages", json=new_page(slug="Not A Slug"), headers=admin_headers)
    assert r.status_code == 400
    assert r.json()["error"]["details"]["errors"][0]["field"] == "slug"
    assert count_rows(Page) == 0


def test_delete_page(client, admin_headers, make_page, count_rows, activity_logs):
    page = make_page("old")

    r = client.delete(f"/api/admin/pages/{page.id}", headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == {"message": "Page deleted successfully"}
    assert count_rows(Page) == 0

    logs = activity_logs(action="delete")
    assert logs[0]["resource_id"] == str(page.id)
    assert logs[0]["details"]["slug"] == "old"


def test_missing_page_is_404_without_log(client, admin_headers, activity_logs):
    assert client.get("/api/admin/pages/42", headers=admin_headers).status_code == 404
    assert client.put("/api/admin/pages/42", json={"title": "x"}, headers=admin_headers).status_code == 404
    assert client.delete("/api/admin/pages/42", headers=admin_headers).status_code == 404
    assert activity_logs() == []


def test_admin_list_includes_drafts(client, admin_headers, make_page):
    make_page("live")
    make_page("draft", is_published=False)

    slugs = {p["slug"] for p in client.get("/api/admin/pages", headers=admin_headers).json()}
    assert slugs == {"live", "draft"}


def test_section_templates(client, admin_headers):
    r = client.get("/api/admin/pages/section-templates", headers=admin_headers)
    assert r.status_code == 200
    templates = r.json()
    assert set(templates) == {"hero", "text", "features", "pricing"}
    assert templates["hero"]["ctaText"] == "Get Started"


def test_viewer_is_forbidden_and_nothing_is_written(client, viewer_headers, count_rows):
    r = client.post("/api/admin/pages", json=new_page(), headers=viewer_headers)
    assert r.status_code == 403
    assert r.json()["error"]["code"] == "ForbiddenException"
    assert count_rows(Page) == 0
    assert count_rows(ActivityLog) == 0


def test_anonymous_is_unauthorized(client):
    assert client.get("/api/admin/pages").status_code == 401
    assert client.post("/api/admin/pages", json=new_page()).status_code == 401
