"""Unit tests for Settings."""

import pytest
from pydantic import ValidationError

from src.core.config import Settings
from src.core.enums import Environment

BASE = {
    "database_url": "sqlite+aiosqlite:///:memory:",
    "secret_key": "s" * 32,
}


@pytest.mark.unit
class TestSettings:
    def test_defaults(self):
        settings = Settings(**BASE)

        assert settings.access_token_expire_minutes == 60
        assert settings.max_failed_login_attempts == 3
        assert settings.lockout_minutes == 10
        assert settings.api_v1_prefix == "/api/v1"

    def test_short_secret_rejected(self):
        with pytest.raises(ValidationError, match="at least 32 characters"):
            Settings(**{**BASE, "secret_key": "short"})

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_bcrypt_rounds_range(self, rounds):
        with pytest.raises(ValidationError):
            Settings(**BASE, bcrypt_rounds=rounds)

    def test_trailing_slash_stripped_from_base_url(self):
        settings = Settings(**BASE, api_base_url="https://api.example.com/")

        assert settings.api_base_url == "https://api.example.com"

    def test_environment_flags(self):
        settings = Settings(**BASE, environment=Environment.PRODUCTION)

        assert settings.is_production is True
        assert settings.is_development is False
