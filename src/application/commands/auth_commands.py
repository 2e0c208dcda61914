"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Handlers return Result types
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Self-service registration.

    The new account holds no roles; an administrator grants them later.

    Attributes:
        user_name: Login name (validated by the request schema).
        email: Email address (validated, normalized).
        password: Plaintext password (validated strength, will be hashed).
        full_name: Optional display name.

    Example:
        >>> command = RegisterUser(
        ...     user_name="jdoe",
        ...     email="user@example.com",
        ...     password="SecurePass123!",
        ... )
        >>> result = await handler.handle(command)
    """

    user_name: str
    email: str
    password: str
    full_name: str | None = None


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Exchange credentials for an access token.

    Attributes:
        email: Email address (case-insensitive).
        password: Plaintext password. Strength is not re-checked at login.
    """

    email: str
    password: str


@dataclass(frozen=True, kw_only=True)
class LogoutUser:
    """Record a logout for the authenticated user.

    Attributes:
        user_id: Subject of the presented token.
        token_id: ``jti`` claim of the presented token, for the log trail.
    """

    user_id: UUID
    token_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class AccessToken:
    """Response from a successful login (not a command).

    Attributes:
        access_token: Signed JWT.
        token_type: Always "bearer".
        expires_in: Lifetime in seconds.
        roles: Roles embedded in the token.
    """

    access_token: str
    expires_in: int
    roles: list[str]
    token_type: str = "bearer"
