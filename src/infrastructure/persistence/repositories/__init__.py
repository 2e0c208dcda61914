"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.base_repository import (
    SqlAlchemyRepository,
)
from src.infrastructure.persistence.repositories.bid_repository import BidRepository
from src.infrastructure.persistence.repositories.curve_point_repository import (
    CurvePointRepository,
)
from src.infrastructure.persistence.repositories.rating_repository import (
    RatingRepository,
)
from src.infrastructure.persistence.repositories.role_repository import RoleRepository
from src.infrastructure.persistence.repositories.rule_repository import RuleRepository
from src.infrastructure.persistence.repositories.trade_repository import (
    TradeRepository,
)
from src.infrastructure.persistence.repositories.user_repository import UserRepository

__all__ = [
    "BidRepository",
    "CurvePointRepository",
    "RatingRepository",
    "RoleRepository",
    "RuleRepository",
    "SqlAlchemyRepository",
    "TradeRepository",
    "UserRepository",
]
