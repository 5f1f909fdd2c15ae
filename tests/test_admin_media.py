import io
import json

import pytest

from cybersite.application.services import media_service
from cybersite.core.exceptions import BadRequestException
from cybersite.domain.models import MediaFile
from cybersite.infrastructure.storage import StoredObject, get_storage_provider
from cybersite.interfaces.deps import get_storage
from cybersite.main import app

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


class RecordingStorage:
    def __init__(self):
        self.deleted = []

    def put(self, filename, content, content_type):
        return StoredObject(filename=filename, path=f"mem/{filename}", url=f"https://cdn.example.com/{filename}")

    def delete(self, path):
        self.deleted.append(path)


@pytest.fixture
def storage():
    recording = RecordingStorage()
    app.dependency_overrides[get_storage] = lambda: recording
    yield recording
    app.dependency_overrides.pop(get_storage, None)


def upload(client, headers, name="logo.png", content=PNG, content_type="image/png", **form):
    return client.post(
        "/api/admin/media",
        files={"file": (name, content, content_type)},
        data=form,
        headers=headers,
    )


def test_upload_with_simulated_storage(client, admin_headers, activity_logs):
    assert get_storage_provider().__class__.__name__ == "SimulatedStorageProvider"

    r = upload(client, admin_headers, alt="Logo", caption="Our logo", tags=json.dumps(["brand", "logo"]))
    assert r.status_code == 200
    media = r.json()
    assert media["originalName"] == "logo.png"
    assert media["mimeType"] == "image/png"
    assert media["size"] == len(PNG)
    assert media["filename"].endswith("_logo.png")
    assert media["url"] == f"/uploads/{media['filename']}"
    assert media["tags"] == ["brand", "logo"]
    assert media["uploadedBy"] == "editor"

    logs = activity_logs(resource="media")
    assert len(logs) == 1
    assert logs[0]["details"]["mimeType"] == "image/png"


def test_comma_separated_tags(client, admin_headers):
    r = upload(client, admin_headers, tags="hero, banner")
    assert r.json()["tags"] == ["hero", "banner"]


def test_disallowed_type_is_rejected(client, admin_headers, count_rows, activity_logs):
    r = upload(client, admin_headers, name="evil.exe", content=b"MZ", content_type="application/x-msdownload")
    assert r.status_code == 400
    assert "not allowed" in r.json()["error"]["message"]
    assert count_rows(MediaFile) == 0
    assert activity_logs() == []


def test_size_limit_is_enforced():
    media_service.validate_upload("image/png", 10 * 1024 * 1024)
    with pytest.raises(BadRequestException):
        media_service.validate_upload("image/png", 10 * 1024 * 1024 + 1)
    with pytest.raises(BadRequestException):
        media_service.validate_upload("image/png", 0)


def test_oversized_upload_rejected_over_http(client, admin_headers, count_rows):
    r = upload(client, admin_headers, content=b"\x00" * (10 * 1024 * 1024 + 1))
    assert r.status_code == 400
    assert count_rows(MediaFile) == 0


def test_update_metadata_and_delete_through_provider(client, admin_headers, storage, count_rows):
    media = upload(client, admin_headers).json()
    assert media["url"].startswith("https://cdn.example.com/")

    r = client.put(
        f"/api/admin/media/{media['id']}",
        json={"alt": "New alt", "tags": ["a"]},
        headers=admin_headers,
    )
    assert r.status_code == 200
    assert r.json()["alt"] == "New alt"
    assert r.json()["tags"] == ["a"]

    r = client.delete(f"/api/admin/media/{media['id']}", headers=admin_headers)
    assert r.status_code == 200
    assert storage.deleted == [media["path"]]
    assert count_rows(MediaFile) == 0


def test_media_list_newest_first(client, admin_headers):
    first = upload(client, admin_headers, name="a.png").json()
    second = upload(client, admin_headers, name="b.png").json()
    ids = [m["id"] for m in client.get("/api/admin/media", headers=admin_headers).json()]
    assert ids == [second["id"], first["id"]]


def test_storage_filename_is_safe():
    name = media_service.storage_filename("../../etc/pass wd.png")
    assert "/" not in name
    assert name.endswith("_pass_wd.png")


class CountingStream(io.BytesIO):
    def __init__(self, content):
        super().__init__(content)
        self.bytes_read = 0

    def read(self, size=-1):
        chunk = super().read(size)
        self.bytes_read += len(chunk)
        return chunk


def test_upload_body_is_read_only_up_to_the_limit():
    stream = CountingStream(b"\x00" * 1000)

    with pytest.raises(BadRequestException):
        media_service.read_upload(stream, max_bytes=100)

    assert stream.bytes_read == 101
    assert media_service.read_upload(io.BytesIO(PNG), max_bytes=len(PNG)) == PNG
