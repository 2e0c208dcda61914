"""Seeded user roles.

Role names are stored verbatim in the ``roles`` table and in the ``roles``
token claim. Comparison is case-sensitive, so ``"admin"`` does not grant
``Admin`` access.

Usage:
    from src.domain.enums import UserRole

    require_role(UserRole.ADMIN)
"""

from enum import Enum


class UserRole(str, Enum):
    """Roles created by the seeder.

    Administrators may add further roles through ``POST /roles``; only
    ``ADMIN`` is checked by the API itself.
    """

    ADMIN = "Admin"
    """Full write access to reference data and user administration."""

    USER = "User"
    """Standard role (read access only, same as any authenticated user)."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all seeded role names.

        Returns:
            list[str]: ['Admin', 'User'].
        """
        return [role.value for role in cls]
