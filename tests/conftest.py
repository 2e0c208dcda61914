"""Pytest configuration.

Environment variables are set before anything under ``src`` is imported,
because ``src.core.config.settings`` is built at import time.

Provides:
- ``mock_logger``: LoggerProtocol double
- ``test_database``: fresh SQLite database (aiosqlite) per test
- ``make_token`` / ``admin_headers`` / ``user_headers``: bearer tokens
  signed with the application's token service
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-jwt-signing-0123456789")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from collections.abc import Callable  # noqa: E402
from unittest.mock import Mock  # noqa: E402
from uuid import UUID, uuid4  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from src.core.container import get_token_service  # noqa: E402
from src.infrastructure.persistence.database import Database  # noqa: E402


@pytest.fixture
def mock_logger() -> Mock:
    """LoggerProtocol double; ``bind`` returns the same mock."""
    logger = Mock()
    logger.bind.return_value = logger
    return logger


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Provide a fresh file-backed SQLite database with all tables.

    Each test gets its own file, so no data leaks between tests.
    """
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.create_all()

    yield db

    await db.drop_all()
    await db.close()


@pytest.fixture
def make_token() -> Callable[..., str]:
    """Build a signed access token for arbitrary roles."""

    def _make(
        roles: list[str],
        user_id: UUID | None = None,
        user_name: str = "tester",
        email: str = "tester@example.com",
    ) -> str:
        return get_token_service().generate_access_token(
            user_id=user_id or uuid4(),
            user_name=user_name,
            email=email,
            roles=roles,
        )

    return _make


@pytest.fixture
def admin_headers(make_token) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(['Admin'])}"}


@pytest.fixture
def user_headers(make_token) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(['User'])}"}
