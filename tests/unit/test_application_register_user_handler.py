"""Unit tests for RegisterUserHandler and LogoutUserHandler."""

from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.auth_commands import LogoutUser, RegisterUser
from src.application.commands.handlers import LogoutUserHandler, RegisterUserHandler
from src.core.enums import ErrorCode
from src.core.errors import ConflictError
from src.core.result import Failure, Success
from src.domain.entities.user import User
from src.domain.protocols import DuplicateUserError


@pytest.fixture
def user_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.exists_by_email.return_value = False
    repo.exists_by_user_name.return_value = False

    async def save(user: User) -> User:
        user.id = uuid7()
        return user

    repo.save.side_effect = save
    return repo


@pytest.fixture
def handler(user_repo, mock_logger) -> RegisterUserHandler:
    password_service = Mock()
    password_service.hash_password.return_value = "bcrypt_hash"
    return RegisterUserHandler(
        user_repo=user_repo,
        password_service=password_service,
        logger=mock_logger,
    )


COMMAND = RegisterUser(
    user_name="jdoe",
    email="jdoe@example.com",
    password="SecurePass1!",
)


@pytest.mark.unit
class TestRegisterUserHandler:
    @pytest.mark.asyncio
    async def test_register_stores_hashed_user_without_roles(self, handler, user_repo):
        result = await handler.handle(COMMAND)

        assert isinstance(result, Success)
        user = result.value
        assert user.id is not None
        assert user.password_hash == "bcrypt_hash"
        assert user.roles == []
        user_repo.add_roles.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, handler, user_repo):
        user_repo.exists_by_email.return_value = True

        result = await handler.handle(COMMAND)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.EMAIL_ALREADY_EXISTS
        user_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_duplicate_user_name_conflicts(self, handler, user_repo):
        user_repo.exists_by_user_name.return_value = True

        result = await handler.handle(COMMAND)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USER_ALREADY_EXISTS

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_registration_conflicts(
        self, handler, user_repo, mock_logger
    ):
        user_repo.save.side_effect = DuplicateUserError("userName")

        result = await handler.handle(COMMAND)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.USER_ALREADY_EXISTS
        assert result.error.conflicting_field == "userName"
        mock_logger.warning.assert_called_once()


@pytest.mark.unit
class TestLogoutUserHandler:
    @pytest.mark.asyncio
    async def test_logout_always_succeeds(self, mock_logger):
        handler = LogoutUserHandler(logger=mock_logger)

        result = await handler.handle(LogoutUser(user_id=uuid7(), token_id="jti-1"))

        assert isinstance(result, Success)
        assert result.value.message == "Successfully logged out."
        mock_logger.info.assert_called_once()
