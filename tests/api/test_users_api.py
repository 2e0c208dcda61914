"""API tests for user and role administration (Admin only).

Tests cover:
- User CRUD with initial roles and Location header
- Membership add / replace / remove
- Role catalogue create / delete
- Non-admin callers are refused
"""

from uuid import uuid4

import pytest

USERS = "/api/v1/users"
ROLES = "/api/v1/roles"

NEW_USER = {
    "userName": "jdoe",
    "email": "jdoe@example.com",
    "password": "SecurePass123!",
    "fullName": "Jane Doe",
    "roles": ["User"],
}


def create_user(client, headers, body=None) -> dict:
    response = client.post(USERS, json=body or NEW_USER, headers=headers)
    assert response.status_code == 201
    return response.json()


@pytest.mark.api
class TestAccess:
    @pytest.mark.parametrize("path", [USERS, ROLES])
    def test_user_role_is_refused(self, client, user_headers, path):
        response = client.get(path, headers=user_headers)

        assert response.status_code == 403

    @pytest.mark.parametrize("path", [USERS, ROLES])
    def test_anonymous_is_refused(self, client, path):
        assert client.get(path).status_code == 401


@pytest.mark.api
class TestUsers:
    def test_create_user(self, client, admin_headers):
        response = client.post(USERS, json=NEW_USER, headers=admin_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["userName"] == "jdoe"
        assert body["roles"] == ["User"]
        assert body["version"] == 1
        assert "passwordHash" not in body
        assert response.headers["location"].endswith(f"{USERS}/{body['id']}")

    def test_created_user_can_log_in(self, client, admin_headers):
        create_user(client, admin_headers)

        response = client.post(
            "/api/v1/auth/login",
            json={"email": "jdoe@example.com", "password": "SecurePass123!"},
        )

        assert response.json()["roles"] == ["User"]

    def test_create_with_unknown_role_returns_404(self, client, admin_headers):
        response = client.post(
            USERS, json={**NEW_USER, "roles": ["Auditor"]}, headers=admin_headers
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Role not found: Auditor."

    def test_create_duplicate_email_returns_409(self, client, admin_headers):
        create_user(client, admin_headers)

        response = client.post(
            USERS, json={**NEW_USER, "userName": "other"}, headers=admin_headers
        )

        assert response.status_code == 409

    def test_list_and_get(self, client, admin_headers):
        created = create_user(client, admin_headers)

        listed = client.get(USERS, headers=admin_headers).json()
        fetched = client.get(f"{USERS}/{created['id']}", headers=admin_headers)

        assert [user["userName"] for user in listed] == ["admin", "jdoe"]
        assert fetched.json()["email"] == "jdoe@example.com"

    def test_get_missing_returns_404(self, client, admin_headers):
        response = client.get(f"{USERS}/{uuid4()}", headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "User not found with the provided id."

    def test_get_malformed_id_returns_400(self, client, admin_headers):
        assert client.get(f"{USERS}/42", headers=admin_headers).status_code == 400

    def test_update_keeps_roles(self, client, admin_headers):
        created = create_user(client, admin_headers)

        response = client.put(
            f"{USERS}/{created['id']}",
            json={
                "userName": "jdoe2",
                "email": "jdoe2@example.com",
                "fullName": "Jane Q. Doe",
                "version": 1,
            },
            headers=admin_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["userName"] == "jdoe2"
        assert body["roles"] == ["User"]
        assert body["version"] == 2

    def test_update_id_mismatch_returns_400(self, client, admin_headers):
        created = create_user(client, admin_headers)

        response = client.put(
            f"{USERS}/{created['id']}",
            json={"id": str(uuid4()), "userName": "jdoe", "email": "jdoe@example.com"},
            headers=admin_headers,
        )

        assert response.status_code == 400

    def test_update_stale_version_returns_409(self, client, admin_headers):
        created = create_user(client, admin_headers)
        url = f"{USERS}/{created['id']}"
        body = {"userName": "jdoe", "email": "jdoe@example.com", "version": 1}
        client.put(url, json=body, headers=admin_headers)

        response = client.put(url, json=body, headers=admin_headers)

        assert response.status_code == 409

    def test_delete_user(self, client, admin_headers):
        created = create_user(client, admin_headers)
        url = f"{USERS}/{created['id']}"

        response = client.delete(url, headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "User deleted successfully."}
        assert client.get(url, headers=admin_headers).status_code == 404


@pytest.mark.api
class TestMemberships:
    def test_add_reports_roles_already_held(self, client, admin_headers):
        created = create_user(client, admin_headers)
        url = f"{USERS}/{created['id']}/roles"

        response = client.post(url, json={"roles": ["Admin", "User"]}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["alreadyInRoles"] == ["User"]
        roles = client.get(url, headers=admin_headers).json()
        assert roles == {"userId": created["id"], "roles": ["Admin", "User"]}

    def test_add_unknown_role_returns_404(self, client, admin_headers):
        created = create_user(client, admin_headers)

        response = client.post(
            f"{USERS}/{created['id']}/roles",
            json={"roles": ["Auditor"]},
            headers=admin_headers,
        )

        assert response.status_code == 404

    def test_replace_roles(self, client, admin_headers):
        created = create_user(client, admin_headers)

        response = client.put(
            f"{USERS}/{created['id']}/roles",
            json={"roles": ["Admin"]},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["roles"] == ["Admin"]

    def test_replace_with_empty_list_clears_roles(self, client, admin_headers):
        created = create_user(client, admin_headers)

        response = client.put(
            f"{USERS}/{created['id']}/roles", json={"roles": []}, headers=admin_headers
        )

        assert response.json()["roles"] == []

    def test_remove_role(self, client, admin_headers):
        created = create_user(client, admin_headers)
        url = f"{USERS}/{created['id']}/roles"

        response = client.delete(f"{url}/User", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Role removed from User successfully."}
        assert client.get(url, headers=admin_headers).json()["roles"] == []

    def test_memberships_of_missing_user(self, client, admin_headers):
        url = f"{USERS}/{uuid4()}/roles"

        assert client.get(url, headers=admin_headers).status_code == 404
        assert (
            client.put(url, json={"roles": []}, headers=admin_headers).status_code
            == 404
        )


@pytest.mark.api
class TestRoleCatalogue:
    def test_list_roles(self, client, admin_headers):
        response = client.get(ROLES, headers=admin_headers)

        assert [role["name"] for role in response.json()] == ["Admin", "User"]

    def test_create_role(self, client, admin_headers):
        response = client.post(ROLES, json={"name": "Auditor"}, headers=admin_headers)

        assert response.status_code == 201
        assert response.json()["name"] == "Auditor"
        assert response.headers["location"].endswith(f"{ROLES}/Auditor")

    def test_create_existing_role_returns_409(self, client, admin_headers):
        response = client.post(ROLES, json={"name": "Admin"}, headers=admin_headers)

        assert response.status_code == 409
        assert response.json()["message"] == "Role already exists."

    def test_delete_role_removes_memberships(self, client, admin_headers):
        created = create_user(client, admin_headers)

        response = client.delete(f"{ROLES}/User", headers=admin_headers)

        assert response.status_code == 200
        user = client.get(f"{USERS}/{created['id']}", headers=admin_headers).json()
        assert user["roles"] == []

    def test_delete_unknown_role_returns_404(self, client, admin_headers):
        response = client.delete(f"{ROLES}/Auditor", headers=admin_headers)

        assert response.status_code == 404
