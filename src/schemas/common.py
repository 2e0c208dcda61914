"""Common Pydantic schemas used across multiple modules.

This module contains the camelCase base model, generic message responses,
the health check payload and the business-date type shared by the entity
schemas.
"""

from datetime import UTC, datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


BusinessDateTime = Annotated[datetime, AfterValidator(_to_naive_utc)]
"""Business date stored without timezone.

Offset-aware input is converted to UTC and stripped of its offset; naive
input is stored as given.
"""


MAX_INTEGER_COLUMN = 2_147_483_647
"""Largest value a 32-bit INTEGER column holds (ids and versions)."""


def utc_now_naive() -> datetime:
    """Current UTC time without tzinfo (default for business dates)."""
    return datetime.now(UTC).replace(tzinfo=None)


class CamelModel(BaseModel):
    """Base for API schemas: camelCase on the wire, snake_case in Python.

    Input accepts either spelling; responses are serialized with the
    camelCase aliases.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class EntityRequest(CamelModel):
    """Fields shared by every reference-data write request.

    Attributes:
        id: Optional. On create, a duplicate id conflicts; on update it
            must match the route id.
        version: Optional. When set on update, the write only applies if
            the stored record still has this version.
    """

    id: int | None = Field(
        default=None, ge=1, le=MAX_INTEGER_COLUMN, description="Record id"
    )
    version: int | None = Field(
        default=None,
        ge=1,
        le=MAX_INTEGER_COLUMN,
        description="Expected version (optimistic concurrency)",
    )


class EntityResponse(CamelModel):
    """Bookkeeping fields returned with every reference-data record."""

    id: int = Field(..., description="Record id (store-assigned)")
    version: int = Field(..., description="Current version")
    created_at: datetime | None = Field(default=None, description="Creation time")
    updated_at: datetime | None = Field(default=None, description="Last update time")


class MessageResponse(CamelModel):
    """Generic message response for simple API operations.

    Attributes:
        message: Human-readable success or status message.
    """

    message: str = Field(
        ..., description="Human-readable success or status message", min_length=1
    )

    model_config = ConfigDict(
        json_schema_extra={"example": {"message": "Bid deleted successfully."}}
    )


class HealthResponse(CamelModel):
    """Health check response.

    Attributes:
        status: 'healthy' or 'degraded'.
        database: 'connected' or 'unavailable'.
        version: Application version.
    """

    status: str = Field(..., examples=["healthy"])
    database: str = Field(..., examples=["connected"])
    version: str = Field(..., examples=["1.0.0"])
