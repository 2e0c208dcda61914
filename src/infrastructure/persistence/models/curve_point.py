"""CurvePoint database model."""

from datetime import datetime

from sqlalchemy import DateTime, Float, Integer
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import ReferenceDataModel


class CurvePointModel(ReferenceDataModel):
    """Point on a yield curve.

    Business dates are stored without timezone, as submitted.
    """

    __tablename__ = "curve_points"

    curve_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    term: Mapped[float | None] = mapped_column(Float, nullable=True)
    curve_point_value: Mapped[float | None] = mapped_column(Float, nullable=True)
    as_of_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    creation_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
