"""CurvePointRepository - SQLAlchemy adapter for curve point records."""

from src.domain.entities.curve_point import CurvePoint
from src.infrastructure.persistence.models.curve_point import CurvePointModel
from src.infrastructure.persistence.repositories.base_repository import (
    SqlAlchemyRepository,
)


class CurvePointRepository(SqlAlchemyRepository[CurvePoint, CurvePointModel]):
    """Yield-curve points (``curve_points`` table)."""

    entity_class = CurvePoint
    model_class = CurvePointModel
