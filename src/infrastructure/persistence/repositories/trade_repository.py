"""TradeRepository - SQLAlchemy adapter for trade records."""

from src.domain.entities.trade import Trade
from src.infrastructure.persistence.models.trade import TradeModel
from src.infrastructure.persistence.repositories.base_repository import (
    SqlAlchemyRepository,
)


class TradeRepository(SqlAlchemyRepository[Trade, TradeModel]):
    """Executed trades (``trades`` table)."""

    entity_class = Trade
    model_class = TradeModel
