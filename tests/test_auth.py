from datetime import timedelta

from cybersite.application.services.auth_service import create_access_token
from cybersite.domain.models import User


def provider_token(sub, **claims):
    return create_access_token({"sub": sub, **claims})


def test_session_exchange_creates_viewer_and_sets_cookie(client, db):
    r = client.post(
        "/api/auth/session",
        json={"token": provider_token("u-1", email="new@example.com", first_name="New", last_name="User")},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == "u-1"
    assert body["role"] == "viewer"
    assert body["firstName"] == "New"
    assert "session" in r.cookies

    stored = db.get(User, "u-1")
    assert stored.email == "new@example.com"


def test_super_admin_email_is_bootstrapped(client):
    r = client.post("/api/auth/session", json={"token": provider_token("boss", email="Owner@Example.com")})
    assert r.status_code == 200
    assert r.json()["role"] == "super_admin"


def test_resign_in_refreshes_profile_but_keeps_role(client, db, editor):
    r = client.post(
        "/api/auth/session",
        json={"token": provider_token("editor", email="editor@example.com", first_name="Renamed")},
    )
    assert r.status_code == 200
    assert r.json()["role"] == "editor"
    assert r.json()["firstName"] == "Renamed"

    db.expire_all()
    assert db.get(User, "editor").role == "editor"


def test_current_user_from_cookie(client):
    client.post("/api/auth/session", json={"token": provider_token("u-2", email="u2@example.com")})

    r = client.get("/api/auth/user")
    assert r.status_code == 200
    assert r.json()["id"] == "u-2"


def test_current_user_from_bearer(client, admin_headers):
    r = client.get("/api/auth/user", headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["role"] == "editor"


def test_no_session_is_401(client):
    r = client.get("/api/auth/user")
    assert r.status_code == 401
    assert r.json()["error"]["code"] == "UnauthorizedException"


def test_invalid_and_expired_tokens_are_401(client, editor):
    expired = create_access_token({"sub": editor.id}, expires_delta=timedelta(minutes=-5))
    for token in ("garbage", expired):
        r = client.get("/api/auth/user", headers={"Authorization": f"Bearer {token}"})
        assert r.status_code == 401


def test_token_for_unknown_user_is_401(client):
    r = client.get("/api/auth/user", headers={"Authorization": f"Bearer {provider_token('ghost')}"})
    assert r.status_code == 401


def test_session_exchange_rejects_bad_token(client, count_rows):
    r = client.post("/api/auth/session", json={"token": "not-a-jwt"})
    assert r.status_code == 401
    assert count_rows(User) == 0


def test_session_exchange_requires_subject(client):
    r = client.post("/api/auth/session", json={"token": create_access_token({"email": "x@example.com"})})
    assert r.status_code == 401


def test_logout_clears_cookie(client):
    client.post("/api/auth/session", json={"token": provider_token("u-3")})
    assert client.get("/api/auth/user").status_code == 200

    r = client.post("/api/auth/logout")
    assert r.status_code == 200
    assert client.get("/api/auth/user").status_code == 401


def test_session_token_cannot_be_exchanged_again(client, db):
    r = client.post(
        "/api/auth/session",
        json={"token": provider_token("u-3", email="u3@example.com", first_name="Kept")},
    )
    session_token = r.cookies["session"]

    r = client.post("/api/auth/session", json={"token": session_token})
    assert r.status_code == 401
    assert r.json()["error"]["message"] == "Session tokens cannot be exchanged"

    db.expire_all()
    stored = db.get(User, "u-3")
    assert stored.email == "u3@example.com"
    assert stored.first_name == "Kept"

    # Still valid as a session
    r = client.get("/api/auth/user", headers={"Authorization": f"Bearer {session_token}"})
    assert r.status_code == 200
