"""Tests for the contact inquiry routes."""

import pytest


def _submit(client, **overrides):
    payload = {
        "name": "Jordan Lee",
        "email": "jordan@example.com",
        "phone": "555-0100",
        "message": "Could you quote for a garage extension?",
    }
    payload.update(overrides)
    return client.post("/api/inquiries", json=payload)


@pytest.fixture
def inquiry(client):
    response = _submit(client)
    assert response.status_code == 201
    return response.json()["data"]


def test_submit_is_public_and_unread(inquiry):
    assert inquiry["status"] == "unread"
    assert inquiry["email"] == "jordan@example.com"


@pytest.mark.parametrize(
    "overrides", [{"email": "not-an-email"}, {"message": ""}, {"name": ""}]
)
def test_submit_validation(client, overrides):
    response = _submit(client, **overrides)

    assert response.status_code == 400
    assert response.json()["error"] == "Validation Error"


def test_reading_requires_admin(client, editor_headers, inquiry):
    assert client.get("/api/inquiries").status_code == 401
    assert client.get("/api/inquiries", headers=editor_headers).status_code == 403
    assert client.get(f"/api/inquiries/{inquiry['id']}").status_code == 401


def test_status_workflow(client, auth_headers, inquiry):
    second = _submit(client, name="Sam Park", email="sam@example.com").json()["data"]

    count = client.get("/api/inquiries/unread/count", headers=auth_headers)
    assert count.status_code == 200
    assert count.json()["count"] == 2

    response = client.put(
        f"/api/inquiries/{inquiry['id']}/status", headers=auth_headers, json={"status": "resolved"}
    )
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "resolved"

    assert client.get("/api/inquiries/unread/count", headers=auth_headers).json()["count"] == 1

    unread = client.get("/api/inquiries", headers=auth_headers, params={"status": "unread"}).json()
    assert [i["id"] for i in unread["data"]] == [second["id"]]

    everything = client.get("/api/inquiries", headers=auth_headers, params={"status": "bogus"}).json()
    assert everything["count"] == 2


@pytest.mark.parametrize("body", [{"status": "archived"}, {}])
def test_invalid_status_is_rejected(client, auth_headers, inquiry, body):
    response = client.put(f"/api/inquiries/{inquiry['id']}/status", headers=auth_headers, json=body)

    assert response.status_code == 400


def test_update_status_of_missing_inquiry(client, auth_headers):
    response = client.put("/api/inquiries/999/status", headers=auth_headers, json={"status": "read"})

    assert response.status_code == 404


def test_get_and_delete(client, auth_headers, inquiry):
    response = client.get(f"/api/inquiries/{inquiry['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Jordan Lee"

    assert client.delete(f"/api/inquiries/{inquiry['id']}", headers=auth_headers).status_code == 200
    assert client.get(f"/api/inquiries/{inquiry['id']}", headers=auth_headers).status_code == 404
