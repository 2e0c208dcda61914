"""API test fixtures.

The application runs unchanged against a per-test SQLite file: settings
are pointed at the file and the container's cached database is reset, so
requests go through the real repositories and services. Tables and seed
rows are written with a separate engine before the app starts, because
aiosqlite connections are bound to the event loop that opened them.
"""

import asyncio
from dataclasses import dataclass

import pytest
from fastapi.testclient import TestClient

from src.core.config import settings
from src.core.container import get_database
from src.domain.entities.user import User
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.repositories import RoleRepository, UserRepository
from src.infrastructure.security import BcryptPasswordService
from src.main import app

ADMIN_EMAIL = "admin@poseidon.example"
ADMIN_PASSWORD = "AdminPass123!"


@dataclass
class SeededUsers:
    admin: User


async def _prepare(url: str) -> SeededUsers:
    database = Database(database_url=url)
    await database.create_all()
    async with database.get_session() as session:
        roles = RoleRepository(session)
        await roles.save("Admin")
        await roles.save("User")

        users = UserRepository(session)
        admin = await users.save(
            User(
                id=None,
                user_name="admin",
                email=ADMIN_EMAIL,
                password_hash=BcryptPasswordService(cost_factor=4).hash_password(
                    ADMIN_PASSWORD
                ),
            )
        )
        await users.add_roles(admin.id, ["Admin"])
    await database.close()
    return SeededUsers(admin=admin)


@pytest.fixture
def seeded(tmp_path, monkeypatch) -> SeededUsers:
    """Create tables, the Admin/User roles and an administrator account."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'api.db'}"
    users = asyncio.run(_prepare(url))

    monkeypatch.setattr(settings, "database_url", url)
    get_database.cache_clear()
    yield users
    get_database.cache_clear()


@pytest.fixture
def client(seeded):
    """TestClient over the real application (lifespan included)."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_login_headers(client) -> dict[str, str]:
    """Bearer header obtained by logging in as the seeded administrator."""
    response = client.post(
        "/api/v1/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}
