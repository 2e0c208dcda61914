"""User administration commands (CQRS write operations).

Issued by administrators through ``/users``. Field validation (email
format, password policy, user name characters) happens in the request
schemas before a command is built.
"""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateUser:
    """Create a user with an initial role set.

    Attributes:
        user_name: Unique login name.
        email: Email address (normalized).
        password: Plaintext password (hashed by the service).
        full_name: Optional display name.
        roles: Initial role names; each must exist.
    """

    user_name: str
    email: str
    password: str
    full_name: str | None = None
    roles: list[str] = field(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class UpdateUser:
    """Replace a user's profile.

    ``password`` is optional: when omitted the stored hash is kept.
    ``expected_version`` enables the optimistic-concurrency check.
    """

    user_id: UUID
    user_name: str
    email: str
    full_name: str | None = None
    password: str | None = None
    expected_version: int | None = None
