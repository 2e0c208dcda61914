"""Rating request and response schemas."""

from pydantic import Field

from src.domain.entities.rating import Rating
from src.schemas.common import EntityRequest, EntityResponse


class RatingRequest(EntityRequest):
    """Create/replace payload for a rating.

    Wire names: ``moodysRating``, ``sandPRating``, ``fitchRating``,
    ``orderNumber``.
    """

    moodys_rating: str = Field(..., min_length=1, max_length=50, examples=["Aaa"])
    sand_p_rating: str = Field(..., min_length=1, max_length=50, examples=["AAA"])
    fitch_rating: str = Field(..., min_length=1, max_length=50, examples=["AAA"])
    order_number: int | None = Field(default=None, ge=0, le=255)

    def to_entity(self) -> Rating:
        return Rating(
            id=self.id,
            moodys_rating=self.moodys_rating,
            sand_p_rating=self.sand_p_rating,
            fitch_rating=self.fitch_rating,
            order_number=self.order_number,
        )


class RatingResponse(EntityResponse):
    moodys_rating: str
    sand_p_rating: str
    fitch_rating: str
    order_number: int | None = None

    @classmethod
    def from_entity(cls, rating: Rating) -> "RatingResponse":
        return cls.model_validate(rating)
