"""Bid request and response schemas.

Includes DTO-to-entity conversion methods used by the bids router.
"""

from pydantic import Field

from src.domain.entities.bid import Bid
from src.schemas.common import EntityRequest, EntityResponse


class BidRequest(EntityRequest):
    """Create/replace payload for a bid.

    POST /api/v1/bids, PUT /api/v1/bids/{id}
    """

    account: str = Field(..., min_length=1, max_length=50, examples=["A1"])
    bid_type: str = Field(..., min_length=1, max_length=50, examples=["T1"])
    bid_quantity: float | None = Field(default=None, ge=0, examples=[100])

    def to_entity(self) -> Bid:
        return Bid(
            id=self.id,
            account=self.account,
            bid_type=self.bid_type,
            bid_quantity=self.bid_quantity,
        )


class BidResponse(EntityResponse):
    """Single bid."""

    account: str
    bid_type: str
    bid_quantity: float | None = None

    @classmethod
    def from_entity(cls, bid: Bid) -> "BidResponse":
        return cls.model_validate(bid)
