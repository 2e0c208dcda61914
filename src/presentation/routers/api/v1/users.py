"""User administration endpoints (Admin only).

Handlers:
    list_users    - GET    /users
    get_user      - GET    /users/{user_id}
    create_user   - POST   /users
    update_user   - PUT    /users/{user_id}
    delete_user   - DELETE /users/{user_id}
    get_roles     - GET    /users/{user_id}/roles
    add_roles     - POST   /users/{user_id}/roles
    replace_roles - PUT    /users/{user_id}/roles
    remove_role   - DELETE /users/{user_id}/roles/{role_name}
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.user_commands import CreateUser, UpdateUser
from src.application.services import UserService
from src.core.config import settings
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.container import get_user_service
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import AdminUser
from src.presentation.routers.api.v1.errors import ErrorResponse, ErrorResponseBuilder
from src.schemas import (
    AddRolesResponse,
    MessageResponse,
    UserCreateRequest,
    UserResponse,
    UserRolesRequest,
    UserRolesResponse,
    UserUpdateRequest,
)

users_router = APIRouter(
    prefix="/users",
    tags=["Users"],
    responses={
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        403: {"model": ErrorResponse, "description": "Admin role required"},
    },
)

Service = Annotated[UserService, Depends(get_user_service)]


@users_router.get("", response_model=list[UserResponse])
async def list_users(current_user: AdminUser, service: Service) -> list[UserResponse]:
    users = await service.list_users()
    return [UserResponse.from_entity(user) for user in users]


@users_router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_user(
    request: Request,
    user_id: UUID,
    current_user: AdminUser,
    service: Service,
) -> UserResponse | JSONResponse:
    match await service.get_user(user_id):
        case Success(value=user):
            return UserResponse.from_entity(user)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@users_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=UserResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse, "description": "Unknown role"},
        409: {"model": ErrorResponse},
    },
)
async def create_user(
    request: Request,
    response: Response,
    data: UserCreateRequest,
    current_user: AdminUser,
    service: Service,
) -> UserResponse | JSONResponse:
    """Create a user with an initial role set.

    POST /api/v1/users → 201 Created + Location
    """
    command = CreateUser(
        user_name=data.user_name,
        email=data.email,
        password=data.password,
        full_name=data.full_name,
        roles=data.roles,
    )

    match await service.create_user(command):
        case Success(value=user):
            response.headers["Location"] = (
                f"{settings.api_base_url}{settings.api_v1_prefix}/users/{user.id}"
            )
            return UserResponse.from_entity(user)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@users_router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def update_user(
    request: Request,
    user_id: UUID,
    data: UserUpdateRequest,
    current_user: AdminUser,
    service: Service,
) -> UserResponse | JSONResponse:
    """Replace a user's profile. Roles are managed under ``/roles``."""
    if data.id is not None and data.id != user_id:
        return ErrorResponseBuilder.from_domain_error(
            ValidationError(
                code=ErrorCode.ID_MISMATCH,
                message="The provided id does not match the id in the request.",
                field="id",
            ),
            request,
        )

    command = UpdateUser(
        user_id=user_id,
        user_name=data.user_name,
        email=data.email,
        full_name=data.full_name,
        password=data.password,
        expected_version=data.version,
    )

    match await service.update_user(command):
        case Success(value=user):
            return UserResponse.from_entity(user)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@users_router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_user(
    request: Request,
    user_id: UUID,
    current_user: AdminUser,
    service: Service,
) -> MessageResponse | JSONResponse:
    match await service.delete_user(user_id):
        case Success():
            return MessageResponse(message="User deleted successfully.")
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


# =============================================================================
# Memberships
# =============================================================================


@users_router.get(
    "/{user_id}/roles",
    response_model=UserRolesResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_roles(
    request: Request,
    user_id: UUID,
    current_user: AdminUser,
    service: Service,
) -> UserRolesResponse | JSONResponse:
    match await service.get_user_roles(user_id):
        case Success(value=roles):
            return UserRolesResponse(user_id=user_id, roles=roles)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@users_router.post(
    "/{user_id}/roles",
    response_model=AddRolesResponse,
    responses={404: {"model": ErrorResponse}},
)
async def add_roles(
    request: Request,
    user_id: UUID,
    data: UserRolesRequest,
    current_user: AdminUser,
    service: Service,
) -> AddRolesResponse | JSONResponse:
    """Grant roles. Roles already held are reported, not an error."""
    match await service.add_roles(user_id, data.roles):
        case Success(value=already_held):
            return AddRolesResponse(already_in_roles=already_held)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@users_router.put(
    "/{user_id}/roles",
    response_model=UserRolesResponse,
    responses={404: {"model": ErrorResponse}},
)
async def replace_roles(
    request: Request,
    user_id: UUID,
    data: UserRolesRequest,
    current_user: AdminUser,
    service: Service,
) -> UserRolesResponse | JSONResponse:
    match await service.replace_roles(user_id, data.roles):
        case Success(value=roles):
            return UserRolesResponse(user_id=user_id, roles=roles)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@users_router.delete(
    "/{user_id}/roles/{role_name}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
)
async def remove_role(
    request: Request,
    user_id: UUID,
    role_name: str,
    current_user: AdminUser,
    service: Service,
) -> MessageResponse | JSONResponse:
    match await service.remove_role(user_id, role_name):
        case Success():
            return MessageResponse(message="Role removed from User successfully.")
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
