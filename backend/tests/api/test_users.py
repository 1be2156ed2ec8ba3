"""
Tests for the user endpoints.

Accounts are created through the signup route, so every request goes
through the same guard and policy path as in production.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


def register(client, email, role="user", name=None):
    response = client.post(
        "/api/auth/signup",
        json={"name": name or email.split("@")[0], "email": email, "password": "secret123", "role": role},
    )
    assert response.status_code == 201
    body = response.json()
    return body["id"], {"Authorization": f"Bearer {body['token']}"}


@pytest.fixture
def admin(client):
    return register(client, "root@example.com", role="admin")


@pytest.fixture
def ada(client):
    return register(client, "ada@example.com", name="Ada")


class TestMe:
    def test_me(self, client, ada):
        ada_id, headers = ada
        response = client.get("/api/users/me", headers=headers)
        assert response.status_code == 200
        assert response.json()["id"] == ada_id
        assert "password_hash" not in response.json()


class TestListUsers:
    def test_admin_lists_newest_first(self, client, admin):
        _, headers = admin
        for i in range(6):
            register(client, f"u{i}@example.com")

        response = client.get("/api/users", params={"limit": 5, "page": 1}, headers=headers)

        assert response.status_code == 200
        body = response.json()
        assert [u["email"] for u in body["data"]] == [f"u{i}@example.com" for i in (5, 4, 3, 2, 1)]
        assert body["meta"] == {
            "current_page": 1,
            "items_per_page": 5,
            "total_items": 7,
            "total_pages": 2,
            "has_next_page": True,
            "has_previous_page": False,
        }

    def test_default_limit(self, client, admin):
        _, headers = admin
        assert client.get("/api/users", headers=headers).json()["meta"]["items_per_page"] == 10

    def test_user_forbidden(self, client, ada):
        _, headers = ada
        response = client.get("/api/users", headers=headers)
        assert response.status_code == 403
        assert response.json()["error"] == "FORBIDDEN"

    @pytest.mark.parametrize("params", [{"limit": 0}, {"limit": 101}, {"page": 0}])
    def test_bounds(self, client, admin, params):
        _, headers = admin
        assert client.get("/api/users", params=params, headers=headers).status_code == 422


class TestGetUser:
    def test_admin_gets_user(self, client, admin, ada):
        _, headers = admin
        ada_id, _ = ada
        response = client.get(f"/api/users/{ada_id}", headers=headers)
        assert response.status_code == 200
        assert response.json()["name"] == "Ada"

    def test_not_found(self, client, admin):
        _, headers = admin
        response = client.get("/api/users/missing", headers=headers)
        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"


class TestUpdateUser:
    def test_owner_updates_name(self, client, ada):
        ada_id, headers = ada
        response = client.patch(f"/api/users/{ada_id}", json={"name": "Ada L."}, headers=headers)
        assert response.status_code == 200
        assert response.json()["name"] == "Ada L."

    def test_user_updates_other(self, client, ada, admin):
        admin_id, _ = admin
        _, headers = ada
        response = client.patch(f"/api/users/{admin_id}", json={"name": "x"}, headers=headers)
        assert response.status_code == 403
        assert response.json()["error"] == "UNAUTHORIZED_UPDATE"

    def test_user_promotes_self(self, client, ada):
        ada_id, headers = ada
        response = client.patch(f"/api/users/{ada_id}", json={"role": "admin"}, headers=headers)
        assert response.status_code == 403

    def test_admin_promotes_user(self, client, admin, ada):
        _, admin_headers = admin
        ada_id, ada_headers = ada

        response = client.patch(f"/api/users/{ada_id}", json={"role": "admin"}, headers=admin_headers)
        assert response.status_code == 200

        # Ada's existing token now passes admin routes.
        assert client.get("/api/users", headers=ada_headers).status_code == 200

    def test_email_in_use(self, client, ada, admin):
        ada_id, headers = ada
        response = client.patch(f"/api/users/{ada_id}", json={"email": "root@example.com"}, headers=headers)
        assert response.status_code == 409
        assert response.json()["error"] == "EMAIL_IN_USE"


class TestDeleteUser:
    def test_admin_deletes_user(self, client, admin, ada):
        _, admin_headers = admin
        ada_id, ada_headers = ada

        response = client.delete(f"/api/users/{ada_id}", headers=admin_headers)

        assert response.status_code == 204
        assert client.get(f"/api/users/{ada_id}", headers=admin_headers).status_code == 404
        # The deleted account's token no longer authenticates.
        assert client.get("/api/users/me", headers=ada_headers).status_code == 401

    def test_admin_deletes_self(self, client, admin):
        admin_id, headers = admin
        response = client.delete(f"/api/users/{admin_id}", headers=headers)
        assert response.status_code == 403
        assert response.json()["error"] == "SELF_DELETION"

    def test_user_cannot_delete(self, client, ada, admin):
        admin_id, _ = admin
        _, headers = ada
        assert client.delete(f"/api/users/{admin_id}", headers=headers).status_code == 403

    def test_delete_missing(self, client, admin):
        _, headers = admin
        assert client.delete("/api/users/missing", headers=headers).status_code == 404
