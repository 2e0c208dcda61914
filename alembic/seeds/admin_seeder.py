"""Bootstrap administrator seeder.

Creates one administrator from ``ADMIN_USER_NAME`` / ``ADMIN_EMAIL`` /
``ADMIN_PASSWORD`` when all three are set and no user with that email
exists. The account gets the ``Admin`` role. Runs after ``seed_roles``.
"""

from uuid import uuid4

import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.domain.enums import UserRole
from src.infrastructure.security import BcryptPasswordService

logger = structlog.get_logger(__name__)


async def seed_admin_user(session: AsyncSession) -> None:
    """Create the bootstrap administrator if configured and missing.

    Args:
        session: Async database session.
    """
    if not (
        settings.admin_user_name and settings.admin_email and settings.admin_password
    ):
        logger.info("admin_seeding_skipped", reason="not_configured")
        return

    email = settings.admin_email.strip().lower()
    result = await session.execute(
        text("SELECT 1 FROM users WHERE lower(email) = :email LIMIT 1"),
        {"email": email},
    )
    if result.fetchone() is not None:
        logger.info("admin_seeding_skipped", reason="already_exists")
        return

    password_hash = BcryptPasswordService(
        cost_factor=settings.bcrypt_rounds
    ).hash_password(settings.admin_password)
    user_id = uuid4()

    await session.execute(
        text("""
            INSERT INTO users (id, user_name, email, password_hash, failed_login_attempts)
            VALUES (:id, :user_name, :email, :password_hash, 0)
        """),
        {
            "id": user_id,
            "user_name": settings.admin_user_name,
            "email": email,
            "password_hash": password_hash,
        },
    )
    await session.execute(
        text("""
            INSERT INTO user_roles (user_id, role_id)
            SELECT :user_id, id FROM roles WHERE name = :role
        """),
        {"user_id": user_id, "role": UserRole.ADMIN.value},
    )

    logger.info("admin_seeding_complete", user_name=settings.admin_user_name)
