"""Rating database model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import ReferenceDataModel


class RatingModel(ReferenceDataModel):
    """Credit rating from the three agencies."""

    __tablename__ = "ratings"

    moodys_rating: Mapped[str] = mapped_column(String(50), nullable=False)
    sand_p_rating: Mapped[str] = mapped_column(String(50), nullable=False)
    fitch_rating: Mapped[str] = mapped_column(String(50), nullable=False)
    order_number: Mapped[int | None] = mapped_column(Integer, nullable=True)
