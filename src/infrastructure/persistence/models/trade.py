"""Trade database model."""

from datetime import datetime

from sqlalchemy import DateTime, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import ReferenceDataModel


class TradeModel(ReferenceDataModel):
    """Executed trade.

    Fields:
        account, account_type: Required account identification
        buy_/sell_ quantity and price: Nullable, non-negative
        trade_date, creation_date, revision_date: Business dates (no timezone)
        remaining strings: Optional descriptive attributes
    """

    __tablename__ = "trades"

    account: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    account_type: Mapped[str] = mapped_column(String(50), nullable=False)
    buy_quantity: Mapped[float | None] = mapped_column(Float, nullable=True)
    sell_quantity: Mapped[float | None] = mapped_column(Float, nullable=True)
    buy_price: Mapped[float | None] = mapped_column(Float, nullable=True)
    sell_price: Mapped[float | None] = mapped_column(Float, nullable=True)
    trade_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    trade_security: Mapped[str | None] = mapped_column(String(100), nullable=True)
    trade_status: Mapped[str | None] = mapped_column(String(50), nullable=True)
    trader: Mapped[str | None] = mapped_column(String(50), nullable=True)
    benchmark: Mapped[str | None] = mapped_column(String(50), nullable=True)
    book: Mapped[str | None] = mapped_column(String(50), nullable=True)
    creation_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    revision_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    deal_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    creation_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    revision_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
