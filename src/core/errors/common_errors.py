"""Common error classes used across all entities and layers.

Error Types (HTTP mapping done by the presentation layer):
- ValidationError: malformed input, route/body id mismatch (400)
- NotFoundError: no row for the requested id (404)
- ConflictError: duplicate id/email, stale version on update (409)
- AuthenticationError: bad credentials, locked account, bad token (401)
- AuthorizationError: missing role claim (403)

Usage:
    from src.core.errors import NotFoundError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.RESOURCE_NOT_FOUND,
        message="Bid not found with the provided id.",
        resource_type="Bid",
        resource_id="42",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation (None for whole-request errors).
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Bid, User, Role, ...).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate key, concurrent update).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (id, email, version, ...).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (invalid credentials, locked account, bad token)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (role claim missing).

    Attributes:
        required_role: Role that was required.
    """

    required_role: str | None = None
