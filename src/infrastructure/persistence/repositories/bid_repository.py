"""BidRepository - SQLAlchemy adapter for bid records."""

from src.domain.entities.bid import Bid
from src.infrastructure.persistence.models.bid import BidModel
from src.infrastructure.persistence.repositories.base_repository import (
    SqlAlchemyRepository,
)


class BidRepository(SqlAlchemyRepository[Bid, BidModel]):
    """Bids placed on accounts (``bids`` table)."""

    entity_class = Bid
    model_class = BidModel
