"""Authentication handler dependency factories.

Request-scoped handler instances for register, login and logout.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.config import settings
from src.core.container.infrastructure import (
    get_logger,
    get_password_service,
    get_token_service,
)
from src.core.container.repositories import get_user_repository

if TYPE_CHECKING:
    from src.application.commands.handlers import (
        LoginUserHandler,
        LogoutUserHandler,
        RegisterUserHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository


# ============================================================================
# Authentication Handler Factories
# ============================================================================


async def get_register_user_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "RegisterUserHandler":
    """Get RegisterUser command handler (request-scoped).

    Creates new handler instance per request with all required dependencies:
    - UserRepository (request-scoped, uses session)
    - BcryptPasswordService (app-scoped singleton)
    - Logger (app-scoped singleton)

    Returns:
        RegisterUserHandler instance.

    Usage:
        @router.post("/auth/register")
        async def register(
            handler: RegisterUserHandler = Depends(get_register_user_handler)
        ):
            result = await handler.handle(command)
    """
    from src.application.commands.handlers import RegisterUserHandler

    return RegisterUserHandler(
        user_repo=user_repo,
        password_service=get_password_service(),
        logger=get_logger(),
    )


async def get_login_user_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "LoginUserHandler":
    """Get LoginUser command handler (request-scoped).

    Lockout policy (attempts, minutes) is read from settings.

    Returns:
        LoginUserHandler instance.
    """
    from src.application.commands.handlers import LoginUserHandler

    return LoginUserHandler(
        user_repo=user_repo,
        password_service=get_password_service(),
        token_service=get_token_service(),
        logger=get_logger(),
        max_failed_attempts=settings.max_failed_login_attempts,
        lockout_minutes=settings.lockout_minutes,
    )


async def get_logout_user_handler() -> "LogoutUserHandler":
    """Get LogoutUser command handler.

    Logout is stateless, so no session is opened.
    """
    from src.application.commands.handlers import LogoutUserHandler

    return LogoutUserHandler(logger=get_logger())
