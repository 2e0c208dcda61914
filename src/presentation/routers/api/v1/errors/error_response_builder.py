"""Error response builder for domain errors.

Routers pattern-match on ``Result`` values and hand any ``DomainError`` to
``ErrorResponseBuilder.from_domain_error``; the error's class decides the
HTTP status.

Exports:
    ErrorResponseBuilder: Utility class for building error responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ErrorResponse,
)

# Error class -> (HTTP status, title)
_ERROR_STATUS: dict[type[DomainError], tuple[int, str]] = {
    ValidationError: (status.HTTP_400_BAD_REQUEST, "Validation Failed"),
    AuthenticationError: (status.HTTP_401_UNAUTHORIZED, "Authentication Required"),
    AuthorizationError: (status.HTTP_403_FORBIDDEN, "Access Denied"),
    NotFoundError: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    ConflictError: (status.HTTP_409_CONFLICT, "Resource Conflict"),
}


class ErrorResponseBuilder:
    """Build error responses from domain errors.

    Example:
        >>> match await service.get(bid_id):
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_domain_error(error, request)
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str | None = None,
    ) -> JSONResponse:
        """Convert a DomainError to a JSON error response.

        Args:
            error: Domain error to convert
            request: FastAPI Request object (for instance URL)
            trace_id: Request trace ID; defaults to the current request's

        Returns:
            JSONResponse with ErrorResponse content
        """
        status_code, title = ErrorResponseBuilder.status_for(error)

        problem = ErrorResponse(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=title,
            status=status_code,
            message=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id or get_trace_id(),
        )

        # Field-specific detail for validation failures
        if isinstance(error, ValidationError) and error.field:
            problem.errors = [
                ErrorDetail(
                    field=error.field,
                    code=error.code.value,
                    message=error.message,
                )
            ]

        headers = (
            {"WWW-Authenticate": "Bearer"}
            if status_code == status.HTTP_401_UNAUTHORIZED
            else None
        )
        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            headers=headers,
        )

    @staticmethod
    def status_for(error: DomainError) -> tuple[int, str]:
        """Map a domain error to (HTTP status, title).

        Example:
            >>> ErrorResponseBuilder.status_for(NotFoundError(...))
            (404, 'Resource Not Found')
        """
        for error_type, mapping in _ERROR_STATUS.items():
            if isinstance(error, error_type):
                return mapping
        return status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"
