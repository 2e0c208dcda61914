"""Trade request and response schemas."""

from datetime import datetime

from pydantic import Field

from src.domain.entities.trade import Trade
from src.schemas.common import BusinessDateTime, EntityRequest, EntityResponse


class TradeRequest(EntityRequest):
    """Create/replace payload for a trade.

    Only ``account`` and ``accountType`` are required.
    """

    account: str = Field(..., min_length=1, max_length=50)
    account_type: str = Field(..., min_length=1, max_length=50)
    buy_quantity: float | None = Field(default=None, ge=0)
    sell_quantity: float | None = Field(default=None, ge=0)
    buy_price: float | None = Field(default=None, ge=0)
    sell_price: float | None = Field(default=None, ge=0)
    trade_date: BusinessDateTime | None = None
    trade_security: str | None = Field(default=None, max_length=100)
    trade_status: str | None = Field(default=None, max_length=50)
    trader: str | None = Field(default=None, max_length=50)
    benchmark: str | None = Field(default=None, max_length=50)
    book: str | None = Field(default=None, max_length=50)
    creation_name: str | None = Field(default=None, max_length=50)
    revision_name: str | None = Field(default=None, max_length=50)
    deal_name: str | None = Field(default=None, max_length=50)
    creation_date: BusinessDateTime | None = None
    revision_date: BusinessDateTime | None = None

    def to_entity(self) -> Trade:
        return Trade(
            id=self.id,
            **self.model_dump(exclude={"id", "version"}, by_alias=False),
        )


class TradeResponse(EntityResponse):
    """Single trade."""

    account: str
    account_type: str
    buy_quantity: float | None = None
    sell_quantity: float | None = None
    buy_price: float | None = None
    sell_price: float | None = None
    trade_date: datetime | None = None
    trade_security: str | None = None
    trade_status: str | None = None
    trader: str | None = None
    benchmark: str | None = None
    book: str | None = None
    creation_name: str | None = None
    revision_name: str | None = None
    deal_name: str | None = None
    creation_date: datetime | None = None
    revision_date: datetime | None = None

    @classmethod
    def from_entity(cls, trade: Trade) -> "TradeResponse":
        return cls.model_validate(trade)
