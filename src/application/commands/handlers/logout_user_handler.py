"""Logout handler.

Access tokens are stateless JWTs and cannot be revoked server-side; they
expire naturally. Logout records the event and the client discards the
token.
"""

from dataclasses import dataclass

from src.application.commands.auth_commands import LogoutUser
from src.core.result import Result, Success
from src.domain.protocols import LoggerProtocol


@dataclass
class LogoutResponse:
    """Response data for successful logout."""

    message: str = "Successfully logged out."


class LogoutUserHandler:
    """Handler for logout user command."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def handle(self, cmd: LogoutUser) -> Result[LogoutResponse, str]:
        """Handle logout command.

        Returns:
            Success(LogoutResponse). Logout always succeeds for an
            authenticated caller.
        """
        self._logger.info(
            "logout_succeeded", user_id=str(cmd.user_id), token_id=cmd.token_id
        )
        return Success(value=LogoutResponse())
