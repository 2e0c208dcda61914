"""Unit tests for JWTService.

Tests cover:
- Claim set of generated tokens
- Validation of issuer, audience, signature and expiry
"""

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from src.core.result import Failure, Success
from src.infrastructure.security.jwt_service import (
    TOKEN_EXPIRED,
    TOKEN_INVALID,
    JWTService,
)

SECRET = "a" * 32


def create_service(**overrides) -> JWTService:
    values = {
        "secret_key": SECRET,
        "issuer": "poseidon-api",
        "audience": "poseidon-clients",
        "expiration_minutes": 60,
    }
    values.update(overrides)
    return JWTService(**values)


def generate(service: JWTService, roles=("Admin",)) -> str:
    return service.generate_access_token(
        user_id=uuid7(),
        user_name="jdoe",
        email="jdoe@example.com",
        roles=list(roles),
    )


@pytest.mark.unit
class TestJWTServiceGeneration:
    def test_short_secret_rejected(self):
        with pytest.raises(ValueError, match="at least 32 bytes"):
            create_service(secret_key="short")

    def test_expires_in_seconds(self):
        assert create_service(expiration_minutes=15).expires_in_seconds == 900

    @freeze_time("2026-05-01 10:00:00")
    def test_token_carries_identity_and_roles(self):
        service = create_service()
        user_id = uuid7()

        token = service.generate_access_token(
            user_id=user_id,
            user_name="jdoe",
            email="jdoe@example.com",
            roles=["Admin", "User"],
        )
        claims = jwt.decode(
            token, SECRET, algorithms=["HS256"], options={"verify_signature": False}
        )

        assert claims["sub"] == str(user_id)
        assert claims["name"] == "jdoe"
        assert claims["email"] == "jdoe@example.com"
        assert claims["roles"] == ["Admin", "User"]
        assert claims["iss"] == "poseidon-api"
        assert claims["aud"] == "poseidon-clients"
        issued = datetime(2026, 5, 1, 10, 0, tzinfo=UTC)
        assert claims["iat"] == int(issued.timestamp())
        assert claims["exp"] == int((issued + timedelta(minutes=60)).timestamp())

    def test_each_token_has_unique_jti(self):
        service = create_service()
        first = jwt.decode(generate(service), options={"verify_signature": False})
        second = jwt.decode(generate(service), options={"verify_signature": False})

        assert first["jti"] != second["jti"]


@pytest.mark.unit
class TestJWTServiceValidation:
    def test_valid_token(self):
        service = create_service()

        result = service.validate_access_token(generate(service))

        assert isinstance(result, Success)
        assert result.value["roles"] == ["Admin"]

    def test_expired_token(self):
        service = create_service(expiration_minutes=1)
        with freeze_time("2026-05-01 10:00:00"):
            token = generate(service)

        with freeze_time("2026-05-01 10:02:00"):
            result = service.validate_access_token(token)

        assert result == Failure(error=TOKEN_EXPIRED)

    def test_wrong_secret(self):
        token = generate(create_service(secret_key="b" * 32))

        result = create_service().validate_access_token(token)

        assert result == Failure(error=TOKEN_INVALID)

    def test_wrong_issuer(self):
        token = generate(create_service(issuer="someone-else"))

        result = create_service().validate_access_token(token)

        assert result == Failure(error=TOKEN_INVALID)

    def test_wrong_audience(self):
        token = generate(create_service(audience="other-clients"))

        result = create_service().validate_access_token(token)

        assert result == Failure(error=TOKEN_INVALID)

    def test_garbage_token(self):
        result = create_service().validate_access_token("not-a-jwt")

        assert isinstance(result, Failure)
        assert result.error == TOKEN_INVALID
