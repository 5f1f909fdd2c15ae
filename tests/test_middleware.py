from starlette.requests import Request

from cybersite.core.middleware import route_template
from cybersite.main import app


def test_route_template_uses_matched_route():
    route = next(r for r in app.routes if getattr(r, "path", None) == "/api/admin/pages/{page_id}")

    assert route_template(Request({"type": "http", "route": route})) == "/api/admin/pages/{page_id}"
    assert route_template(Request({"type": "http"})) is None


def test_responses_carry_request_id(client):
    r = client.get("/health", headers={"X-Request-ID": "0f8fad5b-d9cb-469f-a165-70867728950e"})
    assert r.headers["X-Request-ID"] == "0f8fad5b-d9cb-469f-a165-70867728950e"

    r = client.get("/api/pages")
    assert r.headers["X-Request-ID"]
