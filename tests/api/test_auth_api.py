"""API tests for register, login and logout.

Tests cover:
- Registration (201, no roles, conflicts, password rules)
- Login token shape and role claim
- Lockout after repeated wrong passwords
- Stateless logout
"""

import jwt
import pytest

from src.core.config import settings
from src.core.container import get_logout_user_handler
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure
from src.main import app
from tests.api.conftest import ADMIN_EMAIL, ADMIN_PASSWORD

REGISTER = "/api/v1/auth/register"
LOGIN = "/api/v1/auth/login"
LOGOUT = "/api/v1/auth/logout"

class RejectingLogoutHandler:
    async def handle(self, cmd):
        return Failure(
            error=AuthenticationError(
                code=ErrorCode.INVALID_CREDENTIALS,
                message="Session is no longer valid.",
            )
        )


NEW_USER = {
    "userName": "jdoe",
    "email": "JDoe@Example.com",
    "password": "SecurePass123!",
    "fullName": "Jane Doe",
}


def decode(token: str) -> dict:
    return jwt.decode(
        token,
        settings.secret_key,
        algorithms=["HS256"],
        audience=settings.jwt_audience,
        issuer=settings.jwt_issuer,
    )


@pytest.mark.api
class TestRegister:
    def test_register_returns_201(self, client):
        response = client.post(REGISTER, json=NEW_USER)

        assert response.status_code == 201
        body = response.json()
        assert body["userName"] == "jdoe"
        assert body["email"] == "jdoe@example.com"
        assert "password" not in body
        assert "passwordHash" not in body

    def test_registered_user_has_no_roles(self, client):
        client.post(REGISTER, json=NEW_USER)

        response = client.post(
            LOGIN, json={"email": "jdoe@example.com", "password": "SecurePass123!"}
        )

        assert response.status_code == 200
        assert response.json()["roles"] == []

    def test_duplicate_email_returns_409(self, client):
        client.post(REGISTER, json=NEW_USER)

        response = client.post(REGISTER, json={**NEW_USER, "userName": "other"})

        assert response.status_code == 409
        assert response.json()["message"] == "Email is already registered."

    def test_duplicate_user_name_returns_409(self, client):
        client.post(REGISTER, json=NEW_USER)

        response = client.post(
            REGISTER, json={**NEW_USER, "email": "other@example.com"}
        )

        assert response.status_code == 409
        assert response.json()["message"] == "User name is already taken."

    @pytest.mark.parametrize(
        "password",
        ["Short1!", "nouppercase123!", "NOLOWERCASE123!", "NoDigitsHere!", "NoSymbol1234"],
    )
    def test_weak_password_returns_400(self, client, password):
        response = client.post(REGISTER, json={**NEW_USER, "password": password})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "password"

    def test_invalid_email_returns_400(self, client):
        response = client.post(REGISTER, json={**NEW_USER, "email": "not-an-email"})

        assert response.status_code == 400


@pytest.mark.api
class TestLogin:
    def test_admin_login_returns_token(self, client, seeded):
        response = client.post(
            LOGIN, json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["tokenType"] == "bearer"
        assert body["expiresIn"] == settings.access_token_expire_minutes * 60
        assert body["roles"] == ["Admin"]

        claims = decode(body["accessToken"])
        assert claims["sub"] == str(seeded.admin.id)
        assert claims["name"] == "admin"
        assert claims["email"] == ADMIN_EMAIL
        assert claims["roles"] == ["Admin"]
        assert claims["exp"] - claims["iat"] == settings.access_token_expire_minutes * 60

    def test_email_is_case_insensitive(self, client):
        response = client.post(
            LOGIN, json={"email": ADMIN_EMAIL.upper(), "password": ADMIN_PASSWORD}
        )

        assert response.status_code == 200

    def test_login_token_authorizes_admin_writes(self, client, admin_login_headers):
        response = client.post(
            "/api/v1/bids",
            json={"account": "A1", "bidType": "T1"},
            headers=admin_login_headers,
        )

        assert response.status_code == 201

    def test_unknown_email_returns_401(self, client):
        response = client.post(
            LOGIN, json={"email": "nobody@example.com", "password": ADMIN_PASSWORD}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid email or password."

    def test_wrong_password_returns_401(self, client):
        response = client.post(
            LOGIN, json={"email": ADMIN_EMAIL, "password": "WrongPass123!"}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid email or password."

    def test_lockout_after_three_failures(self, client):
        for _ in range(settings.max_failed_login_attempts):
            client.post(LOGIN, json={"email": ADMIN_EMAIL, "password": "WrongPass123!"})

        response = client.post(
            LOGIN, json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
        )

        assert response.status_code == 401
        assert (
            response.json()["message"]
            == "Account is temporarily locked. Try again later."
        )

    def test_success_resets_failure_count(self, client):
        wrong = {"email": ADMIN_EMAIL, "password": "WrongPass123!"}
        right = {"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}

        for _ in range(settings.max_failed_login_attempts - 1):
            client.post(LOGIN, json=wrong)
        assert client.post(LOGIN, json=right).status_code == 200

        for _ in range(settings.max_failed_login_attempts - 1):
            client.post(LOGIN, json=wrong)
        assert client.post(LOGIN, json=right).status_code == 200


@pytest.mark.api
class TestLogout:
    def test_logout(self, client, admin_login_headers):
        response = client.post(LOGOUT, headers=admin_login_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Successfully logged out."}

    def test_token_still_valid_after_logout(self, client, admin_login_headers):
        client.post(LOGOUT, headers=admin_login_headers)

        response = client.get("/api/v1/bids", headers=admin_login_headers)

        assert response.status_code == 200

    def test_logout_requires_token(self, client):
        assert client.post(LOGOUT).status_code == 401

    def test_logout_failure_uses_error_body(self, client, admin_login_headers):
        app.dependency_overrides[get_logout_user_handler] = RejectingLogoutHandler

        response = client.post(LOGOUT, headers=admin_login_headers)

        assert response.status_code == 401
        assert response.json()["message"] == "Session is no longer valid."
        assert response.json()["trace_id"] == response.headers["x-trace-id"]
