from datetime import datetime

from cybersite.domain.models import ContactSubmission, MediaFile, User

CONTACT = {
    "name": "Priya Shah",
    "email": "priya@example.com",
    "subject": "VPS pricing question",
    "message": "Do you offer yearly billing on the Pro plan?",
}


def submit(client, **overrides):
    r = client.post("/api/contact", json={**CONTACT, **overrides})
    assert r.status_code == 200
    return r.json()["id"]


def test_contacts_listed_newest_first_and_filtered(client, admin_headers):
    first = submit(client)
    second = submit(client, name="Arjun Rao")

    r = client.get("/api/admin/contacts", headers=admin_headers)
    assert r.status_code == 200
    assert [c["id"] for c in r.json()] == [second, first]

    client.put(f"/api/admin/contacts/{first}", json={"status": "resolved"}, headers=admin_headers)
    r = client.get("/api/admin/contacts", params={"status": "new"}, headers=admin_headers)
    assert [c["id"] for c in r.json()] == [second]

    r = client.get("/api/admin/contacts", params={"status": "spam"}, headers=admin_headers)
    assert r.status_code == 400


def test_update_contact_status_and_priority(client, admin_headers, activity_logs):
    contact_id = submit(client)

    r = client.put(
        f"/api/admin/contacts/{contact_id}",
        json={"status": "in_progress", "priority": "high"},
        headers=admin_headers,
    )
    assert r.status_code == 200
    assert r.json()["status"] == "in_progress"
    assert r.json()["priority"] == "high"

    logs = activity_logs(resource="contact_submission")
    assert logs[0]["action"] == "update"
    assert logs[0]["details"] == {"changes": {"status": "in_progress", "priority": "high"}}

    r = client.put("/api/admin/contacts/999", json={"status": "closed"}, headers=admin_headers)
    assert r.status_code == 404


def test_public_submission_cannot_set_status(client, count_rows):
    submit(client, status="resolved")
    assert count_rows(ContactSubmission, status="new") == 1


def test_invalid_contact_submission(client, count_rows):
    r = client.post("/api/contact", json={**CONTACT, "email": "not-an-email", "message": "short"})
    assert r.status_code == 400
    fields = {e["field"] for e in r.json()["error"]["details"]["errors"]}
    assert {"email", "message"} <= fields
    assert count_rows(ContactSubmission) == 0


def test_dashboard_stats(client, admin_headers, db, make_page, make_service, make_plan):
    make_page("home")
    make_page("draft", is_published=False)
    vps = make_service("vps")
    make_service("legacy", is_active=False)
    make_plan(vps, "Starter")
    make_plan(vps, "Pro")
    db.add(MediaFile(filename="a.png", original_name="a.png", mime_type="image/png", size=1, path="uploads/a.png", url="/uploads/a.png"))
    db.add(
        ContactSubmission(
            name="Old",
            email="old@example.com",
            message="An old enquiry from years ago",
            status="resolved",
            created_at=datetime(2020, 1, 1),
        )
    )
    db.commit()
    submit(client)

    r = client.get("/api/admin/dashboard/stats", headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == {
        "totalPages": 2,
        "publishedPages": 1,
        "totalServices": 2,
        "activeServices": 1,
        "totalPlans": 2,
        "totalMediaFiles": 1,
        "totalContacts": 2,
        "newContacts": 1,
        "contactsToday": 1,
    }


def test_activity_logs_newest_first_with_limit(client, admin_headers):
    for slug in ("one", "two", "three"):
        client.post("/api/admin/services", json={"name": slug.title(), "slug": slug}, headers=admin_headers)

    r = client.get("/api/admin/activity-logs", params={"limit": 2}, headers=admin_headers)
    assert r.status_code == 200
    logs = r.json()
    assert len(logs) == 2
    assert logs[0]["details"]["slug"] == "three"
    assert logs[0]["userId"] == "editor"

    for bad in (0, 501):
        r = client.get("/api/admin/activity-logs", params={"limit": bad}, headers=admin_headers)
        assert r.status_code == 400


def test_viewer_cannot_reach_admin_endpoints(client, viewer_headers):
    for path in ("/api/admin/contacts", "/api/admin/dashboard/stats", "/api/admin/activity-logs"):
        r = client.get(path, headers=viewer_headers)
        assert r.status_code == 403


def test_users_are_super_admin_only(client, admin_headers, owner_headers):
    r = client.get("/api/admin/users", headers=admin_headers)
    assert r.status_code == 403

    r = client.get("/api/admin/users", headers=owner_headers)
    assert r.status_code == 200
    assert {u["id"] for u in r.json()} == {"editor", "owner"}


def test_change_role(client, owner_headers, viewer, count_rows, activity_logs):
    r = client.put(f"/api/admin/users/{viewer.id}/role", json={"role": "editor"}, headers=owner_headers)
    assert r.status_code == 200
    assert r.json()["role"] == "editor"
    assert count_rows(User, id=viewer.id, role="editor") == 1

    logs = activity_logs(resource="user")
    assert logs[0]["resource_id"] == viewer.id
    assert logs[0]["details"] == {"changes": {"role": "editor"}}

    r = client.put(f"/api/admin/users/{viewer.id}/role", json={"role": "root"}, headers=owner_headers)
    assert r.status_code == 400

    r = client.put("/api/admin/users/nobody/role", json={"role": "editor"}, headers=owner_headers)
    assert r.status_code == 404


def test_super_admin_cannot_demote_self(client, owner_headers, count_rows, activity_logs):
    r = client.put("/api/admin/users/owner/role", json={"role": "viewer"}, headers=owner_headers)
    assert r.status_code == 400
    assert count_rows(User, id="owner", role="super_admin") == 1
    assert activity_logs() == []


def test_contact_update_rejects_null_fields(client, admin_headers, count_rows, activity_logs):
    contact_id = submit(client)

    for field in ("status", "priority"):
        r = client.put(f"/api/admin/contacts/{contact_id}", json={field: None}, headers=admin_headers)
        assert r.status_code == 400
        assert r.json()["error"]["code"] == "ValidationError"
        assert r.json()["error"]["details"]["errors"][0]["field"] == field

    assert count_rows(ContactSubmission, id=contact_id, status="new", priority="normal") == 1
    assert activity_logs() == []
