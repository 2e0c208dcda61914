"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (RegisterUser, LoginUser).

Each auth command has a handler in ``handlers/``; user administration
commands are executed by ``UserService``.
"""

from src.application.commands.auth_commands import (
    AccessToken,
    LoginUser,
    LogoutUser,
    RegisterUser,
)
from src.application.commands.user_commands import CreateUser, UpdateUser

__all__ = [
    # Auth commands
    "AccessToken",
    "LoginUser",
    "LogoutUser",
    "RegisterUser",
    # User administration
    "CreateUser",
    "UpdateUser",
]
