"""Role seeder.

Seeds the built-in ``Admin`` and ``User`` roles. Idempotent via existence
checks - safe to run on every migration.
"""

import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.enums import UserRole

logger = structlog.get_logger(__name__)


async def seed_roles(session: AsyncSession) -> None:
    """Insert every ``UserRole`` that is not present yet.

    Args:
        session: Async database session.
    """
    seeded_count = 0
    skipped_count = 0

    for name in UserRole.values():
        result = await session.execute(
            text("SELECT 1 FROM roles WHERE name = :name LIMIT 1"),
            {"name": name},
        )
        if result.fetchone() is not None:
            skipped_count += 1
            continue

        await session.execute(
            text("INSERT INTO roles (name) VALUES (:name)"),
            {"name": name},
        )
        seeded_count += 1

    logger.info("role_seeding_complete", seeded=seeded_count, skipped=skipped_count)
