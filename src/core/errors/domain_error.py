"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for every expected failure in the API:
validation problems, missing rows, duplicate keys, bad credentials.
They flow through services as data (``Result`` types), not exceptions,
and are turned into HTTP responses by the presentation layer.

Unexpected failures (store unreachable, programming errors) stay as
exceptions and end up in the global 500 handler.

Usage:
    from src.core.errors import DomainError

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message (returned to clients).
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
