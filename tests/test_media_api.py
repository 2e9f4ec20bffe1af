"""Tests for the media routes and the media reference checker."""

import pytest
from fastapi.testclient import TestClient
from starlette.datastructures import UploadFile

from config import MAX_FILE_SIZE
from core.dependencies import get_media_manager
from models.media import MediaModel
from utils.media_manager import MediaManager

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 128


def _upload(client, headers, content=PNG_BYTES, filename="site.png", content_type="image/png"):
    return client.post(
        "/api/media/upload",
        headers=headers,
        files={"image": (filename, content, content_type)},
    )


def _project_payload(image_src):
    return {
        "title": "Harbour Offices",
        "description": "Four storey office block",
        "category": "commercial",
        "completionDate": "2024-05-01T00:00:00",
        "location": "Dockside",
        "images": [{"src": image_src}],
    }


@pytest.fixture
def uploaded(client, auth_headers):
    response = _upload(client, auth_headers)
    assert response.status_code == 201
    return response.json()["data"]


def test_upload_stores_file_and_record(client, auth_headers, upload_dir):
    response = _upload(client, auth_headers)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Image uploaded successfully"
    data = body["data"]
    assert data["size"] == len(PNG_BYTES)
    assert data["mimeType"] == "image/png"
    assert data["originalName"] == "site.png"
    assert data["url"] == f"/uploads/{data['filename']}"
    assert (upload_dir / data["filename"]).read_bytes() == PNG_BYTES


def test_upload_requires_authentication(client, upload_dir):
    response = _upload(client, {})

    assert response.status_code == 401
    assert list(upload_dir.iterdir()) == []


def test_upload_rejects_disallowed_type(client, auth_headers, upload_dir, db):
    response = _upload(
        client, auth_headers, content=b"%PDF-1.4", filename="plan.pdf", content_type="application/pdf"
    )

    assert response.status_code == 400
    assert "file type" in response.json()["message"]
    assert list(upload_dir.iterdir()) == []
    assert db.query(MediaModel).count() == 0


def test_upload_rejects_file_at_size_ceiling(client, auth_headers, upload_dir):
    response = _upload(client, auth_headers, content=b"\x00" * MAX_FILE_SIZE)

    assert response.status_code == 400
    assert response.json()["error"] == "File Too Large"
    assert list(upload_dir.iterdir()) == []


def test_upload_accepts_file_just_under_ceiling(client, auth_headers):
    response = _upload(client, auth_headers, content=b"\x00" * (MAX_FILE_SIZE - 1))

    assert response.status_code == 201
    assert response.json()["data"]["size"] == MAX_FILE_SIZE - 1


def test_upload_without_file(client, auth_headers):
    response = client.post("/api/media/upload", headers=auth_headers, data={"note": "nothing"})

    assert response.status_code == 400
    assert response.json()["message"] == "No file uploaded"


def test_upload_removes_file_when_record_fails(client, auth_headers, upload_dir, session_factory, storage):
    class BrokenMediaManager(MediaManager):
        def create_media(self, **kwargs):
            raise RuntimeError("database unavailable")

    session = session_factory()
    client.app.dependency_overrides[get_media_manager] = lambda: BrokenMediaManager(session, storage)
    try:
        response = TestClient(client.app, raise_server_exceptions=False).post(
            "/api/media/upload",
            headers=auth_headers,
            files={"image": ("site.png", PNG_BYTES, "image/png")},
        )
    finally:
        session.close()

    assert response.status_code == 500
    assert response.json()["error"] == "Server Error"
    assert "details" not in response.json()
    assert list(upload_dir.iterdir()) == []


def test_list_and_get(client, auth_headers, uploaded):
    listing = client.get("/api/media", headers=auth_headers).json()
    assert listing["count"] == 1
    assert listing["data"][0]["id"] == uploaded["id"]

    response = client.get(f"/api/media/{uploaded['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["data"]["url"] == uploaded["url"]


def test_get_missing_media(client, auth_headers):
    response = client.get("/api/media/999", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["message"] == "Image not found"


def test_delete_unreferenced_media(client, auth_headers, uploaded, upload_dir):
    response = client.delete(f"/api/media/{uploaded['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["message"] == "Image deleted successfully"
    assert not (upload_dir / uploaded["filename"]).exists()

    again = client.delete(f"/api/media/{uploaded['id']}", headers=auth_headers)
    assert again.status_code == 404


def test_delete_requires_authentication(client, uploaded):
    response = client.delete(f"/api/media/{uploaded['id']}")

    assert response.status_code == 401


def test_delete_referenced_media_is_refused(client, auth_headers, uploaded, upload_dir, db):
    project = client.post("/api/projects", headers=auth_headers, json=_project_payload(uploaded["url"]))
    assert project.status_code == 201

    response = client.delete(f"/api/media/{uploaded['id']}", headers=auth_headers)

    assert response.status_code == 409
    body = response.json()
    assert "in use" in body["message"]
    assert body["usageCount"] == 1
    assert (upload_dir / uploaded["filename"]).exists()
    assert db.query(MediaModel).filter(MediaModel.id == uploaded["id"]).count() == 1

    client.delete(f"/api/projects/{project.json()['data']['id']}", headers=auth_headers)

    retry = client.delete(f"/api/media/{uploaded['id']}", headers=auth_headers)
    assert retry.status_code == 200
    assert not (upload_dir / uploaded["filename"]).exists()


def test_usage_count_covers_every_reference(client, auth_headers, uploaded):
    payload = _project_payload(uploaded["url"])
    payload["images"] = [{"src": uploaded["url"]}, {"src": uploaded["url"], "alt": "Lobby"}]
    client.post("/api/projects", headers=auth_headers, json=payload)
    client.post("/api/projects", headers=auth_headers, json=_project_payload(uploaded["url"]))

    response = client.delete(f"/api/media/{uploaded['id']}", headers=auth_headers)

    assert response.status_code == 409
    assert response.json()["usageCount"] == 3


def test_delete_when_file_already_gone(client, auth_headers, uploaded, upload_dir):
    (upload_dir / uploaded["filename"]).unlink()

    response = client.delete(f"/api/media/{uploaded['id']}", headers=auth_headers)

    assert response.status_code == 200


def test_reference_count_ignores_other_urls(db, storage, uploaded):
    manager = MediaManager(db, storage)

    assert manager.count_references(uploaded["url"]) == 0
    assert manager.count_references("/uploads/something-else.png") == 0


def test_oversized_upload_is_not_read_into_memory(client, auth_headers, upload_dir, monkeypatch):
    returned = []
    original_read = UploadFile.read

    async def recording_read(self, size=-1):
        data = await original_read(self, size)
        returned.append(len(data))
        return data

    monkeypatch.setattr(UploadFile, "read", recording_read)

    response = _upload(client, auth_headers, content=b"\x00" * (MAX_FILE_SIZE * 2))

    assert response.status_code == 400
    assert response.json()["error"] == "File Too Large"
    assert sum(returned) <= MAX_FILE_SIZE
    assert list(upload_dir.iterdir()) == []


def test_delete_keeps_record_when_file_cannot_be_removed(client, auth_headers, uploaded, upload_dir, storage, monkeypatch):
    def refuse_remove(filename):
        raise PermissionError(f"cannot remove {filename}")

    monkeypatch.setattr(storage, "remove", refuse_remove)

    response = TestClient(client.app, raise_server_exceptions=False).delete(
        f"/api/media/{uploaded['id']}", headers=auth_headers
    )

    assert response.status_code == 500
    assert response.json()["error"] == "Server Error"
    assert client.get(f"/api/media/{uploaded['id']}", headers=auth_headers).status_code == 200
    assert (upload_dir / uploaded["filename"]).exists()


def test_row_delete_is_flushed_before_file_removal(db, storage, monkeypatch):
    manager = MediaManager(db, storage)
    filename = storage.save(PNG_BYTES, "yard.png")
    media = manager.create_media(
        filename=filename,
        original_name="yard.png",
        mime_type="image/png",
        size=len(PNG_BYTES),
        url=storage.url_for(filename),
    )
    media_id = media.id
    rows_at_removal = []
    original_remove = storage.remove

    def remove(name):
        rows_at_removal.append(db.query(MediaModel).filter(MediaModel.id == media_id).count())
        return original_remove(name)

    monkeypatch.setattr(storage, "remove", remove)

    manager.delete_media(media_id)

    assert rows_at_removal == [0]
    assert not (storage.upload_dir / filename).exists()
