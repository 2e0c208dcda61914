"""Unit tests for UserService (user and role administration).

Tests cover:
- create_user: identity conflicts, unknown roles, initial roles
- update_user: password kept/rehashed, stale version, uniqueness race
- role memberships: add (already held reported), replace, remove
- role catalogue: duplicate role, delete unknown role
"""

from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest

from src.application.commands.user_commands import CreateUser, UpdateUser
from src.application.services import UserService
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, NotFoundError
from src.core.result import Failure, Success
from src.domain.entities import Role, User
from src.domain.protocols import DuplicateUserError, StaleRecordError


def create_user(user_id=None, roles=None, version=1) -> User:
    return User(
        id=user_id or uuid4(),
        user_name="jdoe",
        email="jdoe@example.com",
        password_hash="stored_hash",
        full_name="Jane Doe",
        roles=roles or [],
        version=version,
    )


@pytest.fixture
def user_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.exists_by_email.return_value = False
    repo.exists_by_user_name.return_value = False
    return repo


@pytest.fixture
def role_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_names.side_effect = lambda names: [
        Role(name=name, id=i) for i, name in enumerate(names, 1) if name in {"Admin", "User"}
    ]
    return repo


@pytest.fixture
def password_service() -> Mock:
    service = Mock()
    service.hash_password.return_value = "new_hash"
    return service


@pytest.fixture
def service(user_repo, role_repo, password_service, mock_logger) -> UserService:
    return UserService(
        user_repo=user_repo,
        role_repo=role_repo,
        password_service=password_service,
        logger=mock_logger,
    )


def create_command(**overrides) -> CreateUser:
    values = {
        "user_name": "jdoe",
        "email": "jdoe@example.com",
        "password": "SecurePass1!",
        "full_name": "Jane Doe",
        "roles": [],
    }
    values.update(overrides)
    return CreateUser(**values)


@pytest.mark.unit
class TestCreateUser:
    @pytest.mark.asyncio
    async def test_create_hashes_password_and_saves(
        self, service, user_repo, password_service
    ):
        user_repo.save.side_effect = lambda user: create_user()

        result = await service.create_user(create_command())

        assert isinstance(result, Success)
        password_service.hash_password.assert_called_once_with("SecurePass1!")
        saved = user_repo.save.await_args.args[0]
        assert saved.password_hash == "new_hash"
        assert saved.id is None
        user_repo.add_roles.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_with_roles_grants_them(self, service, user_repo):
        created = create_user()
        user_repo.save.return_value = created

        result = await service.create_user(create_command(roles=["User", "Admin"]))

        assert isinstance(result, Success)
        assert result.value.roles == ["Admin", "User"]
        user_repo.add_roles.assert_awaited_once_with(created.id, ["User", "Admin"])

    @pytest.mark.asyncio
    async def test_create_with_unknown_role_fails(self, service, user_repo):
        result = await service.create_user(create_command(roles=["Auditor"]))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.ROLE_NOT_FOUND
        user_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_with_taken_email_conflicts(self, service, user_repo):
        user_repo.exists_by_email.return_value = True

        result = await service.create_user(create_command())

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EMAIL_ALREADY_EXISTS

    @pytest.mark.asyncio
    async def test_create_with_taken_user_name_conflicts(self, service, user_repo):
        user_repo.exists_by_user_name.return_value = True

        result = await service.create_user(create_command())

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.conflicting_field == "userName"

    @pytest.mark.asyncio
    async def test_create_losing_uniqueness_race_conflicts(self, service, user_repo):
        # Both existence checks pass, the unique index rejects the insert
        user_repo.save.side_effect = DuplicateUserError("email")

        result = await service.create_user(create_command(roles=["User"]))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.EMAIL_ALREADY_EXISTS
        assert result.error.conflicting_field == "email"
        user_repo.add_roles.assert_not_awaited()


@pytest.mark.unit
class TestUpdateUser:
    @pytest.mark.asyncio
    async def test_update_without_password_keeps_hash(
        self, service, user_repo, password_service
    ):
        current = create_user()
        user_repo.find_by_id.return_value = current
        user_repo.update.side_effect = lambda user, expected_version=None: user

        result = await service.update_user(
            UpdateUser(
                user_id=current.id,
                user_name="jdoe",
                email="jdoe@example.com",
                full_name="Jane Q. Doe",
            )
        )

        assert isinstance(result, Success)
        assert result.value.password_hash == "stored_hash"
        assert result.value.full_name == "Jane Q. Doe"
        password_service.hash_password.assert_not_called()
        # Unchanged identity is not re-checked against itself
        user_repo.exists_by_email.assert_not_awaited()
        user_repo.exists_by_user_name.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_with_password_rehashes(self, service, user_repo):
        current = create_user()
        user_repo.find_by_id.return_value = current
        user_repo.update.side_effect = lambda user, expected_version=None: user

        result = await service.update_user(
            UpdateUser(
                user_id=current.id,
                user_name="jdoe",
                email="jdoe@example.com",
                password="NewSecure1!",
            )
        )

        assert isinstance(result, Success)
        assert result.value.password_hash == "new_hash"

    @pytest.mark.asyncio
    async def test_update_missing_user(self, service, user_repo):
        user_repo.find_by_id.return_value = None

        result = await service.update_user(
            UpdateUser(user_id=uuid4(), user_name="x", email="x@example.com")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USER_NOT_FOUND

    @pytest.mark.asyncio
    async def test_update_stale_version_conflicts(self, service, user_repo):
        current = create_user(version=3)
        user_repo.find_by_id.return_value = current
        user_repo.update.side_effect = StaleRecordError(current.id, 2)

        result = await service.update_user(
            UpdateUser(
                user_id=current.id,
                user_name="jdoe",
                email="jdoe@example.com",
                expected_version=2,
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.RESOURCE_CONFLICT

    @pytest.mark.asyncio
    async def test_update_losing_uniqueness_race_conflicts(self, service, user_repo):
        current = create_user()
        user_repo.find_by_id.return_value = current
        user_repo.update.side_effect = DuplicateUserError("userName")

        result = await service.update_user(
            UpdateUser(
                user_id=current.id,
                user_name="taken",
                email="jdoe@example.com",
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USER_ALREADY_EXISTS
        assert result.error.conflicting_field == "userName"


@pytest.mark.unit
class TestRoleMemberships:
    @pytest.mark.asyncio
    async def test_add_roles_reports_already_held(self, service, user_repo):
        user = create_user(roles=["User"])
        user_repo.find_by_id.return_value = user
        user_repo.add_roles.return_value = ["User"]

        result = await service.add_roles(user.id, ["User", "Admin"])

        assert isinstance(result, Success)
        assert result.value == ["User"]

    @pytest.mark.asyncio
    async def test_add_unknown_role_fails(self, service, user_repo):
        user_repo.find_by_id.return_value = create_user()

        result = await service.add_roles(uuid4(), ["Auditor"])

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ROLE_NOT_FOUND
        user_repo.add_roles.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_add_roles_to_missing_user(self, service, user_repo):
        user_repo.find_by_id.return_value = None

        result = await service.add_roles(uuid4(), ["Admin"])

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USER_NOT_FOUND

    @pytest.mark.asyncio
    async def test_replace_roles_returns_sorted_set(self, service, user_repo):
        user_repo.find_by_id.return_value = create_user()
        user_repo.replace_roles.return_value = True

        result = await service.replace_roles(uuid4(), ["User", "Admin", "User"])

        assert isinstance(result, Success)
        assert result.value == ["Admin", "User"]

    @pytest.mark.asyncio
    async def test_remove_role_missing_user(self, service, user_repo):
        user_repo.remove_role.return_value = False

        result = await service.remove_role(uuid4(), "Admin")

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)


@pytest.mark.unit
class TestRoleCatalogue:
    @pytest.mark.asyncio
    async def test_create_duplicate_role_conflicts(self, service, role_repo):
        role_repo.exists.return_value = True

        result = await service.create_role("Admin")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ROLE_ALREADY_EXISTS
        assert result.error.message == "Role already exists."
        role_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_role(self, service, role_repo):
        role_repo.exists.return_value = False
        role_repo.save.return_value = Role(name="Auditor", id=3)

        result = await service.create_role("Auditor")

        assert isinstance(result, Success)
        assert result.value.id == 3

    @pytest.mark.asyncio
    async def test_delete_unknown_role(self, service, role_repo):
        role_repo.delete.return_value = False

        result = await service.delete_role("Auditor")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ROLE_NOT_FOUND
