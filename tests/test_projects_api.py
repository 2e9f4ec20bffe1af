"""Tests for the project portfolio routes."""

import pytest


def _payload(**overrides):
    payload = {
        "title": "Riverside Apartments",
        "description": "Twelve unit residential build",
        "category": "residential",
        "completionDate": "2023-09-15T00:00:00",
        "location": "Riverside",
        "images": [],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def project(client, auth_headers):
    response = client.post(
        "/api/projects",
        headers=auth_headers,
        json=_payload(images=[{"src": "/uploads/front.jpg"}, {"src": "/uploads/back.jpg", "alt": "Rear"}]),
    )
    assert response.status_code == 201
    return response.json()["data"]


def test_create_fills_image_defaults(project):
    front, back = project["images"]

    assert project["completionDate"].startswith("2023-09-15")
    assert front["alt"] == "Riverside Apartments"
    assert front["thumbnail"] == "/uploads/front.jpg"
    assert back["alt"] == "Rear"


def test_create_requires_admin(client, editor_headers):
    assert client.post("/api/projects", json=_payload()).status_code == 401
    assert client.post("/api/projects", headers=editor_headers, json=_payload()).status_code == 403


def test_create_rejects_missing_fields(client, auth_headers):
    payload = _payload()
    del payload["title"]

    response = client.post("/api/projects", headers=auth_headers, json=payload)

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation Error"
    assert any(err["field"] == "title" for err in body["errors"])


def test_list_is_public_and_newest_first(client, auth_headers, project):
    client.post(
        "/api/projects",
        headers=auth_headers,
        json=_payload(title="Old Warehouse", completionDate="2019-01-10T00:00:00"),
    )
    client.post(
        "/api/projects",
        headers=auth_headers,
        json=_payload(title="New School", completionDate="2025-02-01T00:00:00"),
    )

    response = client.get("/api/projects")

    assert response.status_code == 200
    titles = [p["title"] for p in response.json()["data"]]
    assert titles == ["New School", "Riverside Apartments", "Old Warehouse"]


def test_get_project(client, project):
    response = client.get(f"/api/projects/{project['id']}")

    assert response.status_code == 200
    assert len(response.json()["data"]["images"]) == 2


def test_get_missing_project(client):
    response = client.get("/api/projects/404")

    assert response.status_code == 404
    assert response.json()["message"] == "Project not found"


def test_update_replaces_images_and_keeps_other_fields(client, auth_headers, project):
    response = client.put(
        f"/api/projects/{project['id']}",
        headers=auth_headers,
        json={"location": "Riverside North", "title": "  ", "images": [{"src": "/uploads/new.jpg"}]},
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["title"] == "Riverside Apartments"
    assert data["location"] == "Riverside North"
    assert [image["src"] for image in data["images"]] == ["/uploads/new.jpg"]


def test_update_without_images_keeps_them(client, auth_headers, project):
    response = client.put(
        f"/api/projects/{project['id']}", headers=auth_headers, json={"category": "mixed-use"}
    )

    assert response.status_code == 200
    assert len(response.json()["data"]["images"]) == 2


def test_delete_project(client, auth_headers, project):
    response = client.delete(f"/api/projects/{project['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert client.get(f"/api/projects/{project['id']}").status_code == 404
    assert client.delete(f"/api/projects/{project['id']}", headers=auth_headers).status_code == 404
