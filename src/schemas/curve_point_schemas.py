"""CurvePoint request and response schemas."""

from datetime import datetime

from pydantic import Field

from src.domain.entities.curve_point import CurvePoint
from src.schemas.common import (
    BusinessDateTime,
    EntityRequest,
    EntityResponse,
    utc_now_naive,
)


class CurvePointRequest(EntityRequest):
    """Create/replace payload for a curve point.

    ``asOfDate`` and ``creationDate`` default to the current UTC time.
    """

    curve_id: int = Field(..., ge=0, le=255, description="Curve identifier")
    term: float | None = Field(default=None, ge=0)
    curve_point_value: float | None = Field(default=None, ge=0)
    as_of_date: BusinessDateTime = Field(default_factory=utc_now_naive)
    creation_date: BusinessDateTime = Field(default_factory=utc_now_naive)

    def to_entity(self) -> CurvePoint:
        return CurvePoint(
            id=self.id,
            curve_id=self.curve_id,
            term=self.term,
            curve_point_value=self.curve_point_value,
            as_of_date=self.as_of_date,
            creation_date=self.creation_date,
        )


class CurvePointResponse(EntityResponse):
    """Single curve point."""

    curve_id: int
    term: float | None = None
    curve_point_value: float | None = None
    as_of_date: datetime | None = None
    creation_date: datetime | None = None

    @classmethod
    def from_entity(cls, curve_point: CurvePoint) -> "CurvePointResponse":
        return cls.model_validate(curve_point)
