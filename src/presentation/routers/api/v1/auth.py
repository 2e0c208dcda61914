"""Authentication endpoints.

Handlers:
    register - Create an account with no roles (public)
    login    - Exchange credentials for a JWT (public)
    logout   - Acknowledge logout for the token bearer (authenticated)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import LoginUser, LogoutUser, RegisterUser
from src.application.commands.handlers import (
    LoginUserHandler,
    LogoutUserHandler,
    RegisterUserHandler,
)
from src.core.container import (
    get_login_user_handler,
    get_logout_user_handler,
    get_register_user_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import AuthenticatedUser
from src.presentation.routers.api.v1.errors import ErrorResponse, ErrorResponseBuilder
from src.schemas import (
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
)

auth_router = APIRouter(prefix="/auth", tags=["Authentication"])


@auth_router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterResponse,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def register(
    request: Request,
    data: RegisterRequest,
    handler: Annotated[RegisterUserHandler, Depends(get_register_user_handler)],
) -> RegisterResponse | JSONResponse:
    """Create a new account.

    POST /api/v1/auth/register → 201 Created

    The account holds no roles until an administrator grants them.

    Returns:
        RegisterResponse on success (201 Created).
        JSONResponse with error on failure (400/409).
    """
    command = RegisterUser(
        user_name=data.user_name,
        email=data.email,
        password=data.password,
        full_name=data.full_name,
    )

    match await handler.handle(command):
        case Success(value=user):
            return RegisterResponse(
                id=user.id,
                user_name=user.user_name,
                email=user.email,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@auth_router.post(
    "/login",
    response_model=TokenResponse,
    responses={401: {"model": ErrorResponse}},
)
async def login(
    request: Request,
    data: LoginRequest,
    handler: Annotated[LoginUserHandler, Depends(get_login_user_handler)],
) -> TokenResponse | JSONResponse:
    """Authenticate and issue an access token.

    POST /api/v1/auth/login → 200 OK

    Unknown email, wrong password and locked account all return 401.
    """
    match await handler.handle(LoginUser(email=data.email, password=data.password)):
        case Success(value=token):
            return TokenResponse(
                access_token=token.access_token,
                token_type=token.token_type,
                expires_in=token.expires_in,
                roles=list(token.roles),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@auth_router.post(
    "/logout",
    response_model=MessageResponse,
    responses={401: {"model": ErrorResponse}},
)
async def logout(
    request: Request,
    current_user: AuthenticatedUser,
    handler: Annotated[LogoutUserHandler, Depends(get_logout_user_handler)],
) -> MessageResponse | JSONResponse:
    """Log out the token bearer.

    POST /api/v1/auth/logout → 200 OK

    Tokens are stateless; the client discards its token.
    """
    result = await handler.handle(
        LogoutUser(user_id=current_user.user_id, token_id=current_user.token_id)
    )
    match result:
        case Success(value=response):
            return MessageResponse(message=response.message)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
