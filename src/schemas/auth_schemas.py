"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST /api/v1/auth/register  - Create account (no roles)
    POST /api/v1/auth/login     - Exchange credentials for a JWT
    POST /api/v1/auth/logout    - Acknowledge logout (token discarded client-side)
"""

from uuid import UUID

from pydantic import ConfigDict, Field

from src.domain.types import Email, Password, UserName
from src.schemas.common import CamelModel


# =============================================================================
# Registration
# =============================================================================


class RegisterRequest(CamelModel):
    """Request schema for registration.

    POST /api/v1/auth/register
    Returns: 201 Created
    """

    user_name: UserName
    email: Email
    password: Password
    full_name: str | None = Field(default=None, max_length=100)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "userName": "jdoe",
                "email": "user@example.com",
                "password": "SecurePass123!",
            }
        }
    )


class RegisterResponse(CamelModel):
    """Response schema for registration (201 Created)."""

    id: UUID = Field(..., description="Created user's ID")
    user_name: str
    email: str
    message: str = Field(default="Registration successful.")


# =============================================================================
# Login
# =============================================================================


class LoginRequest(CamelModel):
    """Request schema for login.

    POST /api/v1/auth/login
    Password strength is not re-checked here.
    """

    email: str = Field(..., min_length=1, max_length=255, examples=["user@example.com"])
    password: str = Field(..., min_length=1, max_length=128, examples=["SecurePass123!"])


class TokenResponse(CamelModel):
    """Response schema for login (200 OK)."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(
        default="bearer", description="Token type for Authorization header"
    )
    expires_in: int = Field(..., description="Access token lifetime in seconds")
    roles: list[str] = Field(default_factory=list, description="Roles in the token")
