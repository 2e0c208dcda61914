"""Registration handler.

Flow:
1. Validate user name/email/password (handled by the request schema types)
2. Check email and user name uniqueness
3. Hash password
4. Save user (no roles)
5. Return Success(user)

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (repositories are injected via protocols)
"""

from src.application.commands.auth_commands import RegisterUser
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.protocols import (
    DuplicateUserError,
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


class RegisterUserHandler:
    """Handler for user registration command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            user_repo: User repository for persistence
            password_service: Password hashing service
            logger: Structured logger
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: RegisterUser) -> Result[User, DomainError]:
        """Handle user registration command.

        Returns:
            Success(user) on successful registration
            Failure(ConflictError) when the email or user name is taken
        """
        self._logger.info("registration_attempted", user_name=cmd.user_name)

        if await self._user_repo.exists_by_email(cmd.email):
            self._logger.warning(
                "registration_failed", user_name=cmd.user_name, reason="email_taken"
            )
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS,
                    message="Email is already registered.",
                    resource_type="User",
                    conflicting_field="email",
                )
            )

        if await self._user_repo.exists_by_user_name(cmd.user_name):
            self._logger.warning(
                "registration_failed",
                user_name=cmd.user_name,
                reason="user_name_taken",
            )
            return Failure(
                error=ConflictError(
                    code=ErrorCode.USER_ALREADY_EXISTS,
                    message="User name is already taken.",
                    resource_type="User",
                    conflicting_field="userName",
                )
            )

        password_hash = self._password_service.hash_password(cmd.password)
        try:
            user = await self._user_repo.save(
                User(
                    id=None,
                    user_name=cmd.user_name,
                    email=cmd.email,
                    password_hash=password_hash,
                    full_name=cmd.full_name,
                )
            )
        except DuplicateUserError as exc:
            # Lost a race with a concurrent registration for the same identity
            email_taken = exc.field == "email"
            self._logger.warning(
                "registration_failed",
                user_name=cmd.user_name,
                reason="email_taken" if email_taken else "user_name_taken",
            )
            return Failure(
                error=ConflictError(
                    code=(
                        ErrorCode.EMAIL_ALREADY_EXISTS
                        if email_taken
                        else ErrorCode.USER_ALREADY_EXISTS
                    ),
                    message=(
                        "Email is already registered."
                        if email_taken
                        else "User name is already taken."
                    ),
                    resource_type="User",
                    conflicting_field=exc.field,
                )
            )

        self._logger.info("registration_succeeded", user_id=str(user.id))
        return Success(value=user)
