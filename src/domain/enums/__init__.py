"""Domain enums for business logic.

Available Enums:
    - UserRole: Seeded role names (Admin, User)
"""

from src.domain.enums.user_role import UserRole

__all__ = [
    "UserRole",
]
