"""Core shared kernel.

Foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Error taxonomy returned by services (validation, not found, conflict, auth)
- Settings and the dependency container

The core module has NO dependencies on other application layers
(the container is the composition root and imports lazily).
"""

from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
