"""JWT authentication dependencies.

FastAPI dependencies for extracting and validating JWT tokens.
Use these dependencies to protect routes that require authentication.

Usage:
    # Any authenticated caller
    @router.post("/auth/logout")
    async def logout(current_user: AuthenticatedUser):
        ...

    # Admin role required
    @router.post("/bids")
    async def create_bid(current_user: AdminUser, ...):
        ...
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_token_service
from src.core.result import Failure, Success
from src.domain.enums import UserRole
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol
from src.infrastructure.security.jwt_service import TOKEN_EXPIRED

# HTTP Bearer token extractor. auto_error is off so a missing header is
# reported as 401 like every other token problem.
bearer_scheme = HTTPBearer(auto_error=False)

_TOKEN_MESSAGES = {
    TOKEN_EXPIRED: "Access token has expired.",
}


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated user information from JWT.

    Attributes:
        user_id: User's unique identifier (from JWT 'sub' claim).
        user_name: Login name (from JWT 'name' claim).
        email: User's email address (from JWT 'email' claim).
        roles: User's roles (from JWT 'roles' claim).
        token_id: JWT unique identifier ('jti').
    """

    user_id: UUID
    user_name: str
    email: str
    roles: list[str]
    token_id: str | None = None


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=message,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
) -> CurrentUser:
    """Get current authenticated user from JWT token.

    Args:
        credentials: Bearer token from Authorization header.
        token_service: JWT token service (injected).

    Returns:
        CurrentUser with user identity from valid JWT.

    Raises:
        HTTPException 401: If token is missing, invalid, or expired.
    """
    if credentials is None:
        raise _unauthorized("Authentication required.")

    result = token_service.validate_access_token(credentials.credentials)

    match result:
        case Success(value=payload):
            try:
                roles_raw = payload.get("roles", [])
                # A single role may be serialized as a bare string
                if isinstance(roles_raw, str):
                    roles_raw = [roles_raw]
                jti_raw = payload.get("jti")

                return CurrentUser(
                    user_id=UUID(str(payload["sub"])),
                    user_name=str(payload.get("name", "")),
                    email=str(payload.get("email", "")),
                    roles=[str(role) for role in roles_raw],
                    token_id=str(jti_raw) if jti_raw else None,
                )
            except (KeyError, TypeError, ValueError) as e:
                raise _unauthorized("Invalid token payload.") from e

        case Failure(error=error):
            raise _unauthorized(_TOKEN_MESSAGES.get(error, "Invalid access token."))


def require_role(
    required_role: str,
) -> Callable[..., Awaitable[CurrentUser]]:
    """Create a dependency that requires a specific role.

    Role names are compared case-sensitively against the token's roles
    claim.

    Usage:
        @router.delete("/users/{user_id}")
        async def delete_user(
            user_id: UUID,
            current_user: CurrentUser = Depends(require_role("Admin")),
        ):
            ...

    Raises:
        HTTPException 401: If the caller is not authenticated.
        HTTPException 403: If user does not have required role.
    """

    async def role_checker(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if required_role not in current_user.roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Role '{required_role}' required.",
            )
        return current_user

    return role_checker


# Type aliases for cleaner route signatures
AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
AdminUser = Annotated[CurrentUser, Depends(require_role(UserRole.ADMIN.value))]
