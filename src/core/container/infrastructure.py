"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL, SQLite in tests)
- Password hashing (bcrypt)
- Token generation (JWT)
- Logging (structlog)

Plus the request-scoped database session.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Creates new session per request with automatic transaction management:
        - Commits on success
        - Rolls back on exception
        - Always closes session

    Repositories built from this session only flush, so every write of a
    request commits (or rolls back) together.

    Yields:
        Database session for request duration.

    Usage:
        @router.get("/bids")
        async def list_bids(
            session: AsyncSession = Depends(get_db_session)
        ):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns BcryptPasswordService with the cost factor from settings.

    Returns:
        Password hashing service implementing PasswordHashingProtocol.
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT token service singleton (app-scoped).

    Returns JWTService with HMAC-SHA256, the configured issuer/audience
    and expiration (60 minutes by default).

    Returns:
        Token generation service implementing TokenGenerationProtocol.
    """
    from src.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        expiration_minutes=settings.access_token_expire_minutes,
    )


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )
