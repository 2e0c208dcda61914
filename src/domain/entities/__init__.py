"""Domain entities for business logic.

Pure dataclasses with no framework dependencies. Persistence models live in
``src.infrastructure.persistence.models`` and are mapped to/from these.
"""

from src.domain.entities.base import Entity
from src.domain.entities.bid import Bid
from src.domain.entities.curve_point import CurvePoint
from src.domain.entities.rating import Rating
from src.domain.entities.role import Role
from src.domain.entities.rule import Rule
from src.domain.entities.trade import Trade
from src.domain.entities.user import User

__all__ = [
    "Bid",
    "CurvePoint",
    "Entity",
    "Rating",
    "Role",
    "Rule",
    "Trade",
    "User",
]
