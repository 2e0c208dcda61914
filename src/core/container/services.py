"""Application service dependency factories.

Request-scoped services for the reference-data entities and for user
administration. One ``EntityService`` per entity, each wrapping that
entity's repository on the request session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import (
    get_db_session,
    get_logger,
    get_password_service,
)
from src.core.container.repositories import get_role_repository, get_user_repository

if TYPE_CHECKING:
    from src.application.services import EntityService, UserService
    from src.domain.entities import Bid, CurvePoint, Rating, Rule, Trade
    from src.infrastructure.persistence.repositories import (
        RoleRepository,
        UserRepository,
    )


# ============================================================================
# Reference-Data Services (Request-Scoped)
# ============================================================================


async def get_bid_service(
    session: AsyncSession = Depends(get_db_session),
) -> "EntityService[Bid]":
    """Get Bid CRUD service (request-scoped).

    Usage:
        @router.get("/bids/{bid_id}")
        async def get_bid(
            bid_id: int,
            service: EntityService[Bid] = Depends(get_bid_service),
        ):
            result = await service.get(bid_id)
    """
    from src.application.services import EntityService
    from src.infrastructure.persistence.repositories import BidRepository

    return EntityService(BidRepository(session=session), "Bid", get_logger())


async def get_curve_point_service(
    session: AsyncSession = Depends(get_db_session),
) -> "EntityService[CurvePoint]":
    """Get CurvePoint CRUD service (request-scoped)."""
    from src.application.services import EntityService
    from src.infrastructure.persistence.repositories import CurvePointRepository

    return EntityService(
        CurvePointRepository(session=session), "CurvePoint", get_logger()
    )


async def get_rating_service(
    session: AsyncSession = Depends(get_db_session),
) -> "EntityService[Rating]":
    """Get Rating CRUD service (request-scoped)."""
    from src.application.services import EntityService
    from src.infrastructure.persistence.repositories import RatingRepository

    return EntityService(RatingRepository(session=session), "Rating", get_logger())


async def get_rule_service(
    session: AsyncSession = Depends(get_db_session),
) -> "EntityService[Rule]":
    """Get Rule CRUD service (request-scoped)."""
    from src.application.services import EntityService
    from src.infrastructure.persistence.repositories import RuleRepository

    return EntityService(RuleRepository(session=session), "Rule", get_logger())


async def get_trade_service(
    session: AsyncSession = Depends(get_db_session),
) -> "EntityService[Trade]":
    """Get Trade CRUD service (request-scoped)."""
    from src.application.services import EntityService
    from src.infrastructure.persistence.repositories import TradeRepository

    return EntityService(TradeRepository(session=session), "Trade", get_logger())


# ============================================================================
# User Administration (Request-Scoped)
# ============================================================================


async def get_user_service(
    user_repo: "UserRepository" = Depends(get_user_repository),
    role_repo: "RoleRepository" = Depends(get_role_repository),
) -> "UserService":
    """Get user/role administration service (request-scoped).

    Both repositories share the same request session (FastAPI caches
    ``get_db_session`` within a request).
    """
    from src.application.services import UserService

    return UserService(
        user_repo=user_repo,
        role_repo=role_repo,
        password_service=get_password_service(),
        logger=get_logger(),
    )
