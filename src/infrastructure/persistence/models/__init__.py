"""Database models for persistence layer.

This package contains SQLAlchemy database models that map to database
tables. These are infrastructure concerns and should not be imported by the
domain layer.

Importing this package registers every table on ``BaseModel.metadata``
(used by ``Database.create_all`` and Alembic autogenerate).

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    Database models live here and are mapped via the repository layer.
"""

from src.infrastructure.persistence.models.bid import BidModel
from src.infrastructure.persistence.models.curve_point import CurvePointModel
from src.infrastructure.persistence.models.rating import RatingModel
from src.infrastructure.persistence.models.role import RoleModel, user_roles
from src.infrastructure.persistence.models.rule import RuleModel
from src.infrastructure.persistence.models.trade import TradeModel
from src.infrastructure.persistence.models.user import UserModel

__all__ = [
    "BidModel",
    "CurvePointModel",
    "RatingModel",
    "RoleModel",
    "RuleModel",
    "TradeModel",
    "UserModel",
    "user_roles",
]
