"""RoleRepository protocol for the role catalogue."""

from collections.abc import Sequence
from typing import Protocol

from src.domain.entities.role import Role


class RoleRepository(Protocol):
    """Role repository protocol (port).

    Role names are case-sensitive and globally unique.
    """

    async def list_all(self) -> Sequence[Role]:
        """Return every role ordered by name."""
        ...

    async def find_by_name(self, name: str) -> Role | None:
        """Find a role by exact name."""
        ...

    async def find_by_names(self, names: Sequence[str]) -> Sequence[Role]:
        """Return the roles whose names appear in ``names``."""
        ...

    async def exists(self, name: str) -> bool:
        """Check whether a role with this name exists."""
        ...

    async def save(self, name: str) -> Role:
        """Create a role and return it with its assigned id."""
        ...

    async def delete(self, name: str) -> bool:
        """Delete a role (memberships cascade).

        Returns:
            True if deleted, False if no role has this name.
        """
        ...
