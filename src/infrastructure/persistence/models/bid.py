"""Bid database model."""

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import ReferenceDataModel


class BidModel(ReferenceDataModel):
    """Bid placed on an account.

    Fields:
        id, version, created_at, updated_at: From ReferenceDataModel
        account: Account name
        bid_type: Bid type
        bid_quantity: Quantity bid (nullable)
    """

    __tablename__ = "bids"

    account: Mapped[str] = mapped_column(String(50), nullable=False)
    bid_type: Mapped[str] = mapped_column(String(50), nullable=False)
    bid_quantity: Mapped[float | None] = mapped_column(Float, nullable=True)
