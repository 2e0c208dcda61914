"""Unit tests for LoginUserHandler.

Tests cover:
- Successful login (token with current roles)
- Invalid credentials (unknown email, wrong password)
- Lockout after the third failure and refusal while locked
- Counter reset on success

Architecture:
- Real User entities, mocked repository/password/token services
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.auth_commands import AccessToken, LoginUser
from src.application.commands.handlers.login_user_handler import (
    ACCOUNT_LOCKED_MESSAGE,
    INVALID_CREDENTIALS_MESSAGE,
    LoginUserHandler,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Success
from src.domain.entities.user import User


def create_user(
    failed_login_attempts: int = 0,
    locked_until: datetime | None = None,
    roles: list[str] | None = None,
) -> User:
    return User(
        id=uuid7(),
        user_name="jdoe",
        email="jdoe@example.com",
        password_hash="stored_hash",
        roles=roles if roles is not None else ["User"],
        failed_login_attempts=failed_login_attempts,
        locked_until=locked_until,
    )


@pytest.fixture
def user_repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def password_service() -> Mock:
    service = Mock()
    service.verify_password.return_value = True
    return service


@pytest.fixture
def token_service() -> Mock:
    service = Mock()
    service.generate_access_token.return_value = "signed.jwt.token"
    service.expires_in_seconds = 3600
    return service


@pytest.fixture
def handler(user_repo, password_service, token_service, mock_logger) -> LoginUserHandler:
    return LoginUserHandler(
        user_repo=user_repo,
        password_service=password_service,
        token_service=token_service,
        logger=mock_logger,
        max_failed_attempts=3,
        lockout_minutes=10,
    )


COMMAND = LoginUser(email="jdoe@example.com", password="SecurePass1!")


@pytest.mark.unit
class TestLoginSuccess:
    @pytest.mark.asyncio
    async def test_login_returns_access_token(self, handler, user_repo, token_service):
        user = create_user(roles=["Admin", "User"])
        user_repo.find_by_email.return_value = user

        result = await handler.handle(COMMAND)

        assert isinstance(result, Success)
        assert result.value == AccessToken(
            access_token="signed.jwt.token",
            expires_in=3600,
            roles=["Admin", "User"],
        )
        assert result.value.token_type == "bearer"
        token_service.generate_access_token.assert_called_once_with(
            user_id=user.id,
            user_name="jdoe",
            email="jdoe@example.com",
            roles=["Admin", "User"],
        )

    @pytest.mark.asyncio
    async def test_login_without_roles_issues_token_with_empty_roles(
        self, handler, user_repo
    ):
        user_repo.find_by_email.return_value = create_user(roles=[])

        result = await handler.handle(COMMAND)

        assert isinstance(result, Success)
        assert result.value.roles == []

    @pytest.mark.asyncio
    async def test_success_resets_failed_attempts(self, handler, user_repo):
        user = create_user(failed_login_attempts=2)
        user_repo.find_by_email.return_value = user

        await handler.handle(COMMAND)

        assert user.failed_login_attempts == 0
        user_repo.record_login_state.assert_awaited_once_with(user)

    @pytest.mark.asyncio
    async def test_clean_success_does_not_write(self, handler, user_repo):
        user_repo.find_by_email.return_value = create_user()

        await handler.handle(COMMAND)

        user_repo.record_login_state.assert_not_awaited()


@pytest.mark.unit
class TestLoginFailure:
    @pytest.mark.asyncio
    async def test_unknown_email(self, handler, user_repo, token_service):
        user_repo.find_by_email.return_value = None

        result = await handler.handle(COMMAND)

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)
        assert result.error.code == ErrorCode.INVALID_CREDENTIALS
        assert result.error.message == INVALID_CREDENTIALS_MESSAGE
        token_service.generate_access_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_wrong_password_counts_attempt(
        self, handler, user_repo, password_service
    ):
        user = create_user()
        user_repo.find_by_email.return_value = user
        password_service.verify_password.return_value = False

        result = await handler.handle(COMMAND)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_CREDENTIALS
        assert user.failed_login_attempts == 1
        user_repo.record_login_state.assert_awaited_once_with(user)

    @pytest.mark.asyncio
    async def test_third_wrong_password_locks_account(
        self, handler, user_repo, password_service
    ):
        user = create_user(failed_login_attempts=2)
        user_repo.find_by_email.return_value = user
        password_service.verify_password.return_value = False

        result = await handler.handle(COMMAND)

        # The failing attempt itself still reports bad credentials
        assert result.error.code == ErrorCode.INVALID_CREDENTIALS
        remaining = user.locked_until - datetime.now(UTC)
        assert timedelta(minutes=9) < remaining <= timedelta(minutes=10)
        assert user.is_locked() is True

    @pytest.mark.asyncio
    async def test_locked_account_refused_even_with_right_password(
        self, handler, user_repo, password_service, token_service
    ):
        user_repo.find_by_email.return_value = create_user(
            locked_until=datetime.now(UTC) + timedelta(minutes=5)
        )

        result = await handler.handle(COMMAND)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ACCOUNT_LOCKED
        assert result.error.message == ACCOUNT_LOCKED_MESSAGE
        password_service.verify_password.assert_not_called()
        token_service.generate_access_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_expired_lock_allows_login(self, handler, user_repo):
        user = create_user(locked_until=datetime.now(UTC) - timedelta(seconds=1))
        user_repo.find_by_email.return_value = user

        result = await handler.handle(COMMAND)

        assert isinstance(result, Success)
        assert user.locked_until is None
