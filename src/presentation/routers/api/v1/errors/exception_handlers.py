"""Global exception handlers for FastAPI application.

This module provides exception handlers that catch exceptions escaping
the routers and convert them to ``ErrorResponse`` bodies.

Handlers:
    http_exception_handler: Converts HTTPException (incl. routing 404/405)
    validation_exception_handler: Converts RequestValidationError (400)
    generic_exception_handler: Catches all unhandled exceptions (500)

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.config import settings
from src.core.container import get_logger
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ErrorResponse,
)

# HTTP status code to (title, slug)
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    409: ("Resource Conflict", "conflict"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    500: ("Internal Server Error", "internal-server-error"),
    503: ("Service Unavailable", "service-unavailable"),
}


def _get_status_title(status_code: int) -> str:
    """Get human-readable title for HTTP status code."""
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[0]


def _get_error_slug(status_code: int) -> str:
    """Get kebab-case error slug for the type URL."""
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[1]


def _field_name(loc: tuple[int | str, ...] | list[int | str]) -> str:
    # ("body", "bidType") -> "bidType"; ("path", "bid_id") -> "bid_id"
    parts = [str(p) for p in loc if p not in ("body", "path", "query", "header")]
    return ".".join(parts) if parts else "body"


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to an ErrorResponse.

    Covers exceptions raised by dependencies (401/403 from the auth
    dependencies) and Starlette's own routing errors (404/405).
    """
    assert isinstance(exc, StarletteHTTPException)

    problem = ErrorResponse(
        type=f"{settings.api_base_url}/errors/{_get_error_slug(exc.status_code)}",
        title=_get_status_title(exc.status_code),
        status=exc.status_code,
        message=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        instance=str(request.url.path),
        errors=None,
        trace_id=get_trace_id(),
    )

    # Preserve any headers from HTTPException (e.g., WWW-Authenticate)
    headers = getattr(exc, "headers", None)

    return JSONResponse(
        status_code=exc.status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to a 400 ErrorResponse.

    Each Pydantic error becomes an ``errors`` entry keyed by the wire
    field name.

    Example:
        >>> # POST /api/v1/bids with {"bidType": "T1"}
        >>> # {
        >>> #   "status": 400,
        >>> #   "message": "Request validation failed. Check 'errors' for details.",
        >>> #   "errors": [{"field": "account", "code": "missing", ...}],
        >>> # }
    """
    assert isinstance(exc, RequestValidationError)

    field_errors = [
        ErrorDetail(
            field=_field_name(error.get("loc", ())),
            code=error.get("type", "validation_error"),
            message=error.get("msg", "Validation failed"),
        )
        for error in exc.errors()
    ]

    problem = ErrorResponse(
        type=f"{settings.api_base_url}/errors/validation-failed",
        title="Validation Failed",
        status=status.HTTP_400_BAD_REQUEST,
        message="Request validation failed. Check 'errors' for details.",
        instance=str(request.url.path),
        errors=field_errors or None,
        trace_id=get_trace_id(),
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=problem.model_dump(exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Logs the exception with the trace id and returns a generic 500; no
    internal detail reaches the client.
    """
    trace_id = get_trace_id()

    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=trace_id,
        request_path=request.url.path,
        request_method=request.method,
    )

    problem = ErrorResponse(
        type=f"{settings.api_base_url}/errors/internal-server-error",
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message="An unexpected error occurred. Please contact support with the trace ID.",
        instance=str(request.url.path),
        errors=None,
        trace_id=trace_id,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
