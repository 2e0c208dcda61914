"""RatingRepository - SQLAlchemy adapter for rating records."""

from src.domain.entities.rating import Rating
from src.infrastructure.persistence.models.rating import RatingModel
from src.infrastructure.persistence.repositories.base_repository import (
    SqlAlchemyRepository,
)


class RatingRepository(SqlAlchemyRepository[Rating, RatingModel]):
    """Agency ratings (``ratings`` table)."""

    entity_class = Rating
    model_class = RatingModel
