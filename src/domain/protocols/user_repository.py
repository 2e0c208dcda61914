"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class DuplicateUserError(Exception):
    """Raised when a write collides with the unique email or user name.

    Covers the race where two requests both pass the existence check.

    Attributes:
        field: Wire name of the colliding field ("email" or "userName").
    """

    def __init__(self, field: str) -> None:
        super().__init__(f"Duplicate user {field}")
        self.field = field


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Role membership is managed through the dedicated ``*_roles`` methods;
    ``save`` and ``update`` never touch it.

    Example Implementation:
        >>> class UserRepository:
        ...     async def find_by_email(self, email: str) -> User | None:
        ...         # Database logic here
        ...         pass
    """

    async def list_all(self) -> Sequence[User]:
        """Return every user ordered by user name."""
        ...

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Returns:
            User (with current role names) if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address.

        Email comparison is case-insensitive.

        Example:
            >>> user = await repo.find_by_email("user@example.com")
            >>> if user:
            ...     print(user.id)
        """
        ...

    async def exists_by_email(self, email: str) -> bool:
        """Check if a user with this email exists (case-insensitive)."""
        ...

    async def exists_by_user_name(self, user_name: str) -> bool:
        """Check if a user with this user name exists."""
        ...

    async def save(self, user: User) -> User:
        """Create new user.

        The store assigns the UUID; any id on the entity is ignored.

        Returns:
            The stored user with id and timestamps filled in.

        Raises:
            DuplicateUserError: Email or user name already stored.
        """
        ...

    async def update(
        self, user: User, expected_version: int | None = None
    ) -> User | None:
        """Replace profile fields of an existing user.

        Args:
            user: User entity with updated fields (``user.id`` must be set).
            expected_version: When given, the update only applies if the
                stored version still matches.

        Returns:
            The updated user, or None if it does not exist.

        Raises:
            StaleRecordError: The stored version differs from expected_version.
            DuplicateUserError: Email or user name taken by another user.
        """
        ...

    async def record_login_state(self, user: User) -> None:
        """Persist ``failed_login_attempts`` and ``locked_until`` only.

        Does not bump the version; login bookkeeping must not invalidate
        an administrator's pending edit.
        """
        ...

    async def delete(self, user_id: UUID) -> bool:
        """Delete a user and its role memberships.

        Returns:
            True if deleted, False if the user does not exist.
        """
        ...

    async def get_role_names(self, user_id: UUID) -> list[str] | None:
        """Return the user's role names, or None if the user does not exist."""
        ...

    async def add_roles(self, user_id: UUID, role_names: Sequence[str]) -> list[str] | None:
        """Add roles to a user.

        Roles already held are skipped.

        Returns:
            Names from ``role_names`` the user already held, or None if the
            user does not exist.
        """
        ...

    async def replace_roles(self, user_id: UUID, role_names: Sequence[str]) -> bool:
        """Replace the user's role set wholesale.

        Returns:
            False if the user does not exist.
        """
        ...

    async def remove_role(self, user_id: UUID, role_name: str) -> bool:
        """Remove one role from a user (no-op if not held).

        Returns:
            False if the user does not exist.
        """
        ...
