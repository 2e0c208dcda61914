"""Bid domain entity."""

from dataclasses import dataclass

from src.domain.entities.base import Entity


@dataclass(kw_only=True)
class Bid(Entity):
    """Bid placed on an account.

    Attributes:
        account: Account name (max 50 characters).
        bid_type: Bid type (max 50 characters).
        bid_quantity: Quantity bid (non-negative, optional).
    """

    account: str
    bid_type: str
    bid_quantity: float | None = None
