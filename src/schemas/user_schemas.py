"""User administration request and response schemas.

Used by the Admin-only ``/users`` and ``/roles`` endpoints. Password
hashes are never serialized.
"""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict, Field

from src.domain.entities.role import Role
from src.domain.entities.user import User
from src.domain.types import Email, Password, UserName
from src.schemas.common import MAX_INTEGER_COLUMN, CamelModel


# =============================================================================
# Users
# =============================================================================


class UserCreateRequest(CamelModel):
    """Create a user (administrator).

    POST /api/v1/users
    Returns: 201 Created
    """

    user_name: UserName
    email: Email
    password: Password
    full_name: str | None = Field(default=None, max_length=100)
    roles: list[str] = Field(
        default_factory=list, description="Initial roles (must exist)"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "userName": "jdoe",
                "email": "jdoe@example.com",
                "password": "SecurePass123!",
                "fullName": "Jane Doe",
                "roles": ["User"],
            }
        }
    )


class UserUpdateRequest(CamelModel):
    """Replace a user's profile (administrator).

    PUT /api/v1/users/{id}
    ``password`` is optional; omit it to keep the current one.
    """

    id: UUID | None = Field(default=None, description="Must match the route id")
    user_name: UserName
    email: Email
    full_name: str | None = Field(default=None, max_length=100)
    password: Password | None = None
    version: int | None = Field(default=None, ge=1, le=MAX_INTEGER_COLUMN)


class UserResponse(CamelModel):
    """Single user (no password hash)."""

    id: UUID
    user_name: str
    email: str
    full_name: str | None = None
    roles: list[str] = Field(default_factory=list)
    version: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,  # type: ignore[arg-type]
            user_name=user.user_name,
            email=user.email,
            full_name=user.full_name,
            roles=list(user.roles),
            version=user.version,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


# =============================================================================
# Memberships
# =============================================================================


class UserRolesRequest(CamelModel):
    """Role names to add (POST) or to set (PUT)."""

    roles: list[str] = Field(..., description="Role names (case-sensitive)")


class UserRolesResponse(CamelModel):
    """Current roles of a user."""

    user_id: UUID
    roles: list[str]


class AddRolesResponse(CamelModel):
    """Result of adding roles; ``alreadyInRoles`` lists the no-ops."""

    message: str = "Roles added to User successfully."
    already_in_roles: list[str] = Field(default_factory=list)


# =============================================================================
# Role catalogue
# =============================================================================


class RoleCreateRequest(CamelModel):
    """POST /api/v1/roles"""

    name: str = Field(..., min_length=1, max_length=50, examples=["Auditor"])


class RoleResponse(CamelModel):
    id: int
    name: str

    @classmethod
    def from_entity(cls, role: Role) -> "RoleResponse":
        return cls(id=role.id, name=role.name)  # type: ignore[arg-type]
