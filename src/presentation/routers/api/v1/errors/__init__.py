"""Error response schemas and exception handlers.

Exports:
    ErrorDetail: Individual field-specific error
    ErrorResponse: Error response body
    ErrorResponseBuilder: Builds responses from domain errors
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from src.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ErrorResponse,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "ErrorResponseBuilder",
    "register_exception_handlers",
]
