"""Role catalogue endpoints (Admin only)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.services import UserService
from src.core.config import settings
from src.core.container import get_user_service
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import AdminUser
from src.presentation.routers.api.v1.errors import ErrorResponse, ErrorResponseBuilder
from src.schemas import MessageResponse, RoleCreateRequest, RoleResponse

roles_router = APIRouter(
    prefix="/roles",
    tags=["Roles"],
    responses={
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        403: {"model": ErrorResponse, "description": "Admin role required"},
    },
)

Service = Annotated[UserService, Depends(get_user_service)]


@roles_router.get("", response_model=list[RoleResponse])
async def list_roles(current_user: AdminUser, service: Service) -> list[RoleResponse]:
    roles = await service.list_roles()
    return [RoleResponse.from_entity(role) for role in roles]


@roles_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=RoleResponse,
    responses={409: {"model": ErrorResponse}},
)
async def create_role(
    request: Request,
    response: Response,
    data: RoleCreateRequest,
    current_user: AdminUser,
    service: Service,
) -> RoleResponse | JSONResponse:
    match await service.create_role(data.name):
        case Success(value=role):
            response.headers["Location"] = (
                f"{settings.api_base_url}{settings.api_v1_prefix}/roles/{role.name}"
            )
            return RoleResponse.from_entity(role)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@roles_router.delete(
    "/{role_name}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_role(
    request: Request,
    role_name: str,
    current_user: AdminUser,
    service: Service,
) -> MessageResponse | JSONResponse:
    """Delete a role; existing memberships are removed with it."""
    match await service.delete_role(role_name):
        case Success():
            return MessageResponse(message="Role deleted successfully.")
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
