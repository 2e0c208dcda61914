"""Result types for railway-oriented programming.

Services return ``Success`` or ``Failure`` instead of raising for expected
outcomes (missing row, duplicate key, bad credentials). Routers pattern-match
on the result and translate failures into HTTP responses.

Usage:
    async def get(self, bid_id: int) -> Result[Bid, DomainError]:
        bid = await self._repository.find_by_id(bid_id)
        if bid is None:
            return Failure(error=NotFoundError(...))
        return Success(value=bid)

    match await service.get(42):
        case Success(value=bid):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result = Success[T] | Failure[E]
