"""Trade domain entity."""

from dataclasses import dataclass
from datetime import datetime

from src.domain.entities.base import Entity


@dataclass(kw_only=True)
class Trade(Entity):
    """Executed trade.

    Attributes:
        account: Account name (max 50 characters).
        account_type: Account type (max 50 characters).
        buy_quantity: Quantity bought (non-negative, optional).
        sell_quantity: Quantity sold (non-negative, optional).
        buy_price: Buy price (non-negative, optional).
        sell_price: Sell price (non-negative, optional).
        trade_date: Date of the trade.
        trade_security: Traded security (max 100 characters).
        trade_status: Status (max 50 characters).
        trader: Trader name.
        benchmark: Benchmark name.
        book: Book name.
        creation_name: Author of the trade record.
        revision_name: Author of the last revision.
        deal_name: Deal name.
        creation_date: Date the trade record was created.
        revision_date: Date of the last revision.
    """

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
