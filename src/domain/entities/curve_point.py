"""CurvePoint domain entity."""

from dataclasses import dataclass
from datetime import datetime

from src.domain.entities.base import Entity


@dataclass(kw_only=True)
class CurvePoint(Entity):
    """Single point of a yield curve.

    Attributes:
        curve_id: Curve identifier (0-255).
        term: Term of the point (non-negative, optional).
        curve_point_value: Value at the term (non-negative, optional).
        as_of_date: Valuation date of the point.
        creation_date: Date the point was produced.
    """

    curve_id: int
    term: float | None = None
    curve_point_value: float | None = None
    as_of_date: datetime | None = None
    creation_date: datetime | None = None
