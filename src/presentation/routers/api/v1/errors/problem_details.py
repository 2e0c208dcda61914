"""Error response schema (Problem Details shape).

Every error leaving the API uses this body. It follows the RFC 9457 field
set (type, title, status, instance) but carries the human-readable text in
``message``, the key clients of this API read.

Exports:
    ErrorDetail: Individual field-specific error
    ErrorResponse: Error response body
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Used for validation errors where multiple fields may have errors.

    Examples:
        >>> error = ErrorDetail(
        ...     field="bidType",
        ...     code="missing",
        ...     message="Field required",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ErrorResponse(BaseModel):
    """Error response body.

    Examples:
        >>> ErrorResponse(
        ...     type="http://localhost:8000/errors/resource_not_found",
        ...     title="Resource Not Found",
        ...     status=404,
        ...     message="Bid not found with the provided id.",
        ...     instance="/api/v1/bids/42",
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/resource_not_found"],
    )
    title: str = Field(..., description="Short summary", examples=["Resource Not Found"])
    status: int = Field(..., description="HTTP status code", examples=[404])
    message: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Bid not found with the provided id."],
    )
    instance: str = Field(
        ...,
        description="Request path of this occurrence",
        examples=["/api/v1/bids/42"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
