"""HTTP client for the Cybersite REST API with a path-keyed query cache.

Reads are cached under their REST path until a mutation invalidates that
path. Every mutation names the paths it invalidates; there are no
optimistic updates, so the next read after a write always hits the server.
"""

import json
from typing import Any, Dict, Iterable, Optional

import httpx
import structlog

logger = structlog.get_logger(__name__)

# Refreshed after every admin write
ADMIN_SUMMARY_KEYS = ("/api/admin/dashboard/stats", "/api/admin/activity-logs")


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, payload: Any = None):
        self.status_code = status_code
        self.payload = payload
        error = payload.get("error") if isinstance(payload, dict) else None
        self.code = error.get("code") if isinstance(error, dict) else None
        message = error.get("message") if isinstance(error, dict) else None
        super().__init__(message or f"HTTP {status_code}")


class QueryCache:
    """Cached responses keyed by REST path (plus query string)."""

    def __init__(self):
        self._entries: Dict[str, Any] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def get(self, key: str) -> Any:
        return self._entries.get(key)

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = value

    def invalidate(self, prefix: str) -> None:
        """Drop `prefix` and every key below it (sub-paths and query variants)."""
        for key in list(self._entries):
            if key == prefix or key.startswith(prefix + "/") or key.startswith(prefix + "?"):
                del self._entries[key]

    def clear(self) -> None:
        self._entries.clear()

    def keys(self):
        return list(self._entries)


def cache_key(path: str, params: Optional[Dict[str, Any]] = None) -> str:
    if not params:
        return path
    query = "&".join(f"{k}={params[k]}" for k in sorted(params) if params[k] is not None)
    return f"{path}?{query}" if query else path


class SiteApiClient:
    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        token: Optional[str] = None,
        http: Optional[httpx.Client] = None,
        timeout: float = 30,
        cookie_name: str = "session",
    ):
        self.http = http or httpx.Client(base_url=base_url, timeout=timeout)
        self.cache = QueryCache()
        self.token = token
        self.cookie_name = cookie_name

    def close(self) -> None:
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    # --- transport ----------------------------------------------------------

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    def _send(self, method: str, path: str, **kwargs) -> Any:
        response = self.http.request(method, path, headers=self._headers(), **kwargs)
        if response.status_code >= 400:
            try:
                payload = response.json()
            except ValueError:
                payload = response.text
            logger.warning("API request failed", method=method, path=path, status_code=response.status_code)
            raise ApiError(response.status_code, payload)
        if not response.content:
            return None
        return response.json()

    def query(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        key = cache_key(path, params)
        if key in self.cache:
            return self.cache.get(key)
        data = self._send("GET", path, params={k: v for k, v in (params or {}).items() if v is not None})
        self.cache.set(key, data)
        return data

    def mutate(self, method: str, path: str, invalidates: Iterable[str] = (), **kwargs) -> Any:
        data = self._send(method, path, **kwargs)
        for key in invalidates:
            self.cache.invalidate(key)
        return data

    def _admin_write(self, method: str, path: str, keys: Iterable[str], **kwargs) -> Any:
        return self.mutate(method, path, invalidates=(*keys, *ADMIN_SUMMARY_KEYS), **kwargs)

    # --- auth ---------------------------------------------------------------

    def sign_in(self, provider_token: str) -> Dict[str, Any]:
        user = self._send("POST", "/api/auth/session", json={"token": provider_token})
        session = self.http.cookies.get(self.cookie_name)
        if session:
            self.token = session
        self.cache.clear()
        return user

    def sign_out(self) -> None:
        self._send("POST", "/api/auth/logout")
        self.token = None
        self.http.cookies.clear()
        self.cache.clear()

    def current_user(self) -> Dict[str, Any]:
        return self.query("/api/auth/user")

    # --- public -------------------------------------------------------------

    def pages(self):
        return self.query("/api/pages")

    def page(self, slug: str):
        return self.query(f"/api/pages/{slug}")

    def services(self):
        return self.query("/api/services")

    def service(self, slug: str):
        return self.query(f"/api/services/{slug}")

    def navigation(self):
        return self.query("/api/navigation")

    def public_settings(self) -> Dict[str, Any]:
        return self.query("/api/settings/public")

    def submit_contact(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.mutate(
            "POST",
            "/api/contact",
            invalidates=("/api/admin/contacts", "/api/admin/dashboard/stats"),
            json=data,
        )

    # --- admin: pages -------------------------------------------------------

    def admin_pages(self):
        return self.query("/api/admin/pages")

    def section_templates(self):
        return self.query("/api/admin/pages/section-templates")

    def create_page(self, data: Dict[str, Any]):
        return self._admin_write("POST", "/api/admin/pages", ("/api/admin/pages", "/api/pages"), json=data)

    def update_page(self, page_id: int, data: Dict[str, Any]):
        return self._admin_write("PUT", f"/api/admin/pages/{page_id}", ("/api/admin/pages", "/api/pages"), json=data)

    def delete_page(self, page_id: int):
        return self._admin_write("DELETE", f"/api/admin/pages/{page_id}", ("/api/admin/pages", "/api/pages"))

    # --- admin: services and plans -----------------------------------------

    def admin_services(self):
        return self.query("/api/admin/services")

    def create_service(self, data: Dict[str, Any]):
        return self._admin_write("POST", "/api/admin/services", ("/api/admin/services", "/api/services"), json=data)

    def update_service(self, service_id: int, data: Dict[str, Any]):
        return self._admin_write(
            "PUT", f"/api/admin/services/{service_id}", ("/api/admin/services", "/api/services"), json=data
        )

    def delete_service(self, service_id: int, cascade: bool = False):
        return self._admin_write(
            "DELETE",
            f"/api/admin/services/{service_id}",
            ("/api/admin/services", "/api/services"),
            params={"cascade": "true"} if cascade else None,
        )

    def service_plans(self, service_id: int):
        return self.query(f"/api/admin/services/{service_id}/plans")

    def _plan_keys(self, service_id: int):
        return (f"/api/admin/services/{service_id}/plans", "/api/services")

    def create_plan(self, service_id: int, data: Dict[str, Any]):
        return self._admin_write(
            "POST", "/api/admin/service-plans", self._plan_keys(service_id), json={**data, "serviceId": service_id}
        )

    def update_plan(self, service_id: int, plan_id: int, data: Dict[str, Any]):
        return self._admin_write("PUT", f"/api/admin/service-plans/{plan_id}", self._plan_keys(service_id), json=data)

    def delete_plan(self, service_id: int, plan_id: int):
        return self._admin_write("DELETE", f"/api/admin/service-plans/{plan_id}", self._plan_keys(service_id))

    # --- admin: navigation --------------------------------------------------

    def admin_navigation(self):
        return self.query("/api/admin/navigation")

    def create_navigation_item(self, data: Dict[str, Any]):
        return self._admin_write("POST", "/api/admin/navigation", ("/api/admin/navigation", "/api/navigation"), json=data)

    def update_navigation_item(self, item_id: int, data: Dict[str, Any]):
        return self._admin_write(
            "PUT", f"/api/admin/navigation/{item_id}", ("/api/admin/navigation", "/api/navigation"), json=data
        )

    def delete_navigation_item(self, item_id: int):
        return self._admin_write("DELETE", f"/api/admin/navigation/{item_id}", ("/api/admin/navigation", "/api/navigation"))

    # --- admin: media -------------------------------------------------------

    def media(self):
        return self.query("/api/admin/media")

    def upload_media(
        self,
        filename: str,
        content: Any,
        content_type: str,
        alt: Optional[str] = None,
        caption: Optional[str] = None,
        tags: Optional[list] = None,
    ):
        """Upload one file; `content` may be bytes or a readable file object."""
        form = {k: v for k, v in {"alt": alt, "caption": caption}.items() if v}
        if tags:
            form["tags"] = json.dumps(tags)
        return self._admin_write(
            "POST",
            "/api/admin/media",
            ("/api/admin/media",),
            files={"file": (filename, content, content_type)},
            data=form,
        )

    def update_media(self, media_id: int, data: Dict[str, Any]):
        return self._admin_write("PUT", f"/api/admin/media/{media_id}", ("/api/admin/media",), json=data)

    def delete_media(self, media_id: int):
        return self._admin_write("DELETE", f"/api/admin/media/{media_id}", ("/api/admin/media",))

    # --- admin: settings ----------------------------------------------------

    def settings(self):
        return self.query("/api/admin/settings")

    def save_setting(self, data: Dict[str, Any]):
        return self._admin_write(
            "PUT", "/api/admin/settings", ("/api/admin/settings", "/api/settings/public"), json=data
        )

    def delete_setting(self, key: str):
        return self._admin_write(
            "DELETE", f"/api/admin/settings/{key}", ("/api/admin/settings", "/api/settings/public")
        )

    # --- admin: contacts, dashboard, users ---------------------------------

    def contacts(self, status: Optional[str] = None):
        return self.query("/api/admin/contacts", {"status": status})

    def update_contact(self, contact_id: int, data: Dict[str, Any]):
        return self._admin_write("PUT", f"/api/admin/contacts/{contact_id}", ("/api/admin/contacts",), json=data)

    def dashboard_stats(self):
        return self.query("/api/admin/dashboard/stats")

    def activity_logs(self, limit: int = 50):
        return self.query("/api/admin/activity-logs", {"limit": limit})

    def users(self):
        return self.query("/api/admin/users")

    def set_role(self, user_id: str, role: str):
        return self._admin_write("PUT", f"/api/admin/users/{user_id}/role", ("/api/admin/users",), json={"role": role})
