"""Command handlers for authentication."""

from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.commands.handlers.logout_user_handler import LogoutUserHandler
from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)

__all__ = ["LoginUserHandler", "LogoutUserHandler", "RegisterUserHandler"]
