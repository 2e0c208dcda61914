"""Repository dependency factories.

Request-scoped repository instances for domain entity persistence.
Each request gets fresh repository instances sharing the request session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        RoleRepository,
        UserRepository,
    )


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "UserRepository":
    """Get user repository (request-scoped).

    Args:
        session: Database session for request duration.
            Injected via Depends(get_db_session).

    Returns:
        UserRepository instance.
    """
    from src.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)


async def get_role_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "RoleRepository":
    """Get role repository (request-scoped)."""
    from src.infrastructure.persistence.repositories import RoleRepository

    return RoleRepository(session=session)
