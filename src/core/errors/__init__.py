"""Expected-failure types returned inside ``Failure``.

The presentation layer maps each class to an HTTP status (see
``ErrorResponseBuilder``).
"""

from src.core.errors.common_errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.core.errors.domain_error import DomainError

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
