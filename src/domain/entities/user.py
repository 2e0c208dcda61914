"""User domain entity for authentication.

Pure business logic, no framework dependencies.

Lockout:
    Consecutive failed logins are counted on the entity. Reaching the
    configured threshold sets ``locked_until``; a successful login resets
    both. Threshold and duration come from settings and are passed in by the
    login handler.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID

DEFAULT_MAX_FAILED_ATTEMPTS = 3
DEFAULT_LOCKOUT_MINUTES = 10


@dataclass
class User:
    """User domain entity with authentication business rules.

    Attributes:
        id: Unique user identifier (UUID, assigned when first saved).
        user_name: Login name (unique, max 50 characters).
        email: Email address (unique, lowercase).
        password_hash: Bcrypt hashed password (never plaintext).
        full_name: Display name (optional).
        roles: Names of the roles currently held.
        failed_login_attempts: Consecutive failed logins.
        locked_until: Timestamp until which login is refused (None if not locked).
        version: Optimistic-concurrency token.
        created_at: Timestamp when user was created.
        updated_at: Timestamp when user was last updated.

    Example:
        >>> user = User(
        ...     id=None,
        ...     user_name="jdoe",
        ...     email="jdoe@example.com",
        ...     password_hash="$2b$12$...",
        ... )
        >>> user.is_locked()
        False
        >>> for _ in range(3):
        ...     user.increment_failed_login()
        >>> user.is_locked()
        True
    """

    id: UUID | None
    user_name: str
    email: str
    password_hash: str
    full_name: str | None = None
    roles: list[str] = field(default_factory=list)
    failed_login_attempts: int = 0
    locked_until: datetime | None = None
    version: int = 1
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def is_locked(self) -> bool:
        """Check if login is currently refused because of failed attempts.

        Returns:
            bool: True if ``locked_until`` is in the future.
        """
        if self.locked_until is None:
            return False
        return datetime.now(UTC) < self.locked_until

    def increment_failed_login(
        self,
        max_attempts: int = DEFAULT_MAX_FAILED_ATTEMPTS,
        lockout_minutes: int = DEFAULT_LOCKOUT_MINUTES,
    ) -> None:
        """Record a failed login and lock the account at the threshold.

        Args:
            max_attempts: Failures that trigger the lock.
            lockout_minutes: Lock duration.

        Side Effects:
            - Increments failed_login_attempts by 1
            - At max_attempts, sets locked_until and restarts the counter so
              the next window starts fresh once the lock expires
        """
        self.failed_login_attempts += 1
        if self.failed_login_attempts >= max_attempts:
            self.locked_until = datetime.now(UTC) + timedelta(minutes=lockout_minutes)
            self.failed_login_attempts = 0

    def reset_failed_login(self) -> None:
        """Clear the failure counter and lock after a successful login."""
        self.failed_login_attempts = 0
        self.locked_until = None

    def has_role(self, role: str) -> bool:
        """Case-sensitive role membership check."""
        return role in self.roles
