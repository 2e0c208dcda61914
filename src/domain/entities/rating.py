"""Rating domain entity."""

from dataclasses import dataclass

from src.domain.entities.base import Entity


@dataclass(kw_only=True)
class Rating(Entity):
    """Credit rating from the three agencies.

    Attributes:
        moodys_rating: Moody's rating (max 50 characters).
        sand_p_rating: S&P rating (max 50 characters).
        fitch_rating: Fitch rating (max 50 characters).
        order_number: Display order (0-255, optional).
    """

    moodys_rating: str
    sand_p_rating: str
    fitch_rating: str
    order_number: int | None = None
