"""Login handler.

Flow:
1. Find user by email
2. Refuse if the account is locked
3. Verify password; on failure count the attempt (may lock the account)
4. Reset failed login counter on success
5. Generate JWT access token carrying the current roles
6. Return Success(AccessToken)

Unknown email, wrong password and locked account all come back as
AuthenticationError (401) with no token.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (repositories are injected via protocols)
"""

from src.application.commands.auth_commands import AccessToken, LoginUser
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenGenerationProtocol,
    UserRepository,
)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password."
ACCOUNT_LOCKED_MESSAGE = "Account is temporarily locked. Try again later."


class LoginUserHandler:
    """Handler for login command.

    Lockout threshold and duration come from settings (defaults: 3
    failures, 10 minutes).
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
        max_failed_attempts: int = 3,
        lockout_minutes: int = 10,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger
        self._max_failed_attempts = max_failed_attempts
        self._lockout_minutes = lockout_minutes

    async def handle(self, cmd: LoginUser) -> Result[AccessToken, DomainError]:
        """Handle login command.

        Returns:
            Success(AccessToken) on valid credentials
            Failure(AuthenticationError) otherwise

        Side Effects:
            - Persists failed-attempt counter and lock on every outcome
              that touches a known account
        """
        user = await self._user_repo.find_by_email(cmd.email)
        if user is None:
            self._logger.warning("login_failed", reason="unknown_email")
            return Failure(error=_invalid_credentials())

        if user.is_locked():
            self._logger.warning(
                "login_failed", user_id=str(user.id), reason="account_locked"
            )
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.ACCOUNT_LOCKED,
                    message=ACCOUNT_LOCKED_MESSAGE,
                )
            )

        if not self._password_service.verify_password(cmd.password, user.password_hash):
            user.increment_failed_login(
                max_attempts=self._max_failed_attempts,
                lockout_minutes=self._lockout_minutes,
            )
            await self._user_repo.record_login_state(user)
            self._logger.warning(
                "login_failed",
                user_id=str(user.id),
                reason="wrong_password",
                locked=user.is_locked(),
            )
            return Failure(error=_invalid_credentials())

        if user.failed_login_attempts or user.locked_until is not None:
            user.reset_failed_login()
            await self._user_repo.record_login_state(user)

        token = self._token_service.generate_access_token(
            user_id=user.id,  # type: ignore[arg-type]
            user_name=user.user_name,
            email=user.email,
            roles=user.roles,
        )

        self._logger.info("login_succeeded", user_id=str(user.id), roles=user.roles)
        return Success(
            value=AccessToken(
                access_token=token,
                expires_in=self._token_service.expires_in_seconds,
                roles=list(user.roles),
            )
        )


def _invalid_credentials() -> AuthenticationError:
    return AuthenticationError(
        code=ErrorCode.INVALID_CREDENTIALS,
        message=INVALID_CREDENTIALS_MESSAGE,
    )
