"""User and role administration service.

Backs the Admin-only ``/users`` and ``/roles`` endpoints. Role names are
case-sensitive; a name must exist in the catalogue before it can be granted.

Membership semantics:
    - add: grants the missing roles, reports those already held
    - replace: sets the role set wholesale
    - remove: idempotent, succeeds even if the role was not held
"""

from collections.abc import Sequence
from uuid import UUID

from src.application.commands.user_commands import CreateUser, UpdateUser
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.role import Role
from src.domain.entities.user import User
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    DuplicateUserError,
    RoleRepository,
    StaleRecordError,
    UserRepository,
)


class UserService:
    """Administration use cases for users, memberships and roles."""

    def __init__(
        self,
        user_repo: UserRepository,
        role_repo: RoleRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._role_repo = role_repo
        self._password_service = password_service
        self._logger = logger

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def list_users(self) -> Sequence[User]:
        return await self._user_repo.list_all()

    async def get_user(self, user_id: UUID) -> Result[User, DomainError]:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            return Failure(error=_user_not_found(user_id))
        return Success(value=user)

    async def create_user(self, cmd: CreateUser) -> Result[User, DomainError]:
        """Create a user with its initial roles.

        Returns:
            Success(user), or Failure with ConflictError (email or user
            name taken) or NotFoundError (unknown role).
        """
        conflict = await self._check_identity_free(cmd.user_name, cmd.email)
        if conflict is not None:
            return Failure(error=conflict)

        missing = await self._unknown_roles(cmd.roles)
        if missing:
            return Failure(error=_role_not_found(missing))

        try:
            user = await self._user_repo.save(
                User(
                    id=None,
                    user_name=cmd.user_name,
                    email=cmd.email,
                    password_hash=self._password_service.hash_password(cmd.password),
                    full_name=cmd.full_name,
                )
            )
        except DuplicateUserError as exc:
            return Failure(error=_identity_conflict(exc.field))
        if cmd.roles:
            await self._user_repo.add_roles(user.id, cmd.roles)  # type: ignore[arg-type]
            user.roles = sorted(set(cmd.roles))

        self._logger.info("user_created", user_id=str(user.id), roles=user.roles)
        return Success(value=user)

    async def update_user(self, cmd: UpdateUser) -> Result[User, DomainError]:
        """Replace a user's profile (roles untouched).

        Returns:
            Success(user), or Failure with NotFoundError, ConflictError
            (identity taken by another user, or stale version).
        """
        current = await self._user_repo.find_by_id(cmd.user_id)
        if current is None:
            return Failure(error=_user_not_found(cmd.user_id))

        conflict = await self._check_identity_free(
            cmd.user_name if cmd.user_name != current.user_name else None,
            cmd.email if cmd.email.lower() != current.email else None,
        )
        if conflict is not None:
            return Failure(error=conflict)

        current.user_name = cmd.user_name
        current.email = cmd.email
        current.full_name = cmd.full_name
        if cmd.password is not None:
            current.password_hash = self._password_service.hash_password(cmd.password)

        try:
            updated = await self._user_repo.update(
                current, expected_version=cmd.expected_version
            )
        except StaleRecordError:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.RESOURCE_CONFLICT,
                    message="User was modified by another request.",
                    resource_type="User",
                    conflicting_field="version",
                )
            )
        except DuplicateUserError as exc:
            return Failure(error=_identity_conflict(exc.field))

        if updated is None:
            return Failure(error=_user_not_found(cmd.user_id))

        self._logger.info("user_updated", user_id=str(cmd.user_id))
        return Success(value=updated)

    async def delete_user(self, user_id: UUID) -> Result[None, DomainError]:
        if not await self._user_repo.delete(user_id):
            return Failure(error=_user_not_found(user_id))
        self._logger.info("user_deleted", user_id=str(user_id))
        return Success(value=None)

    # ------------------------------------------------------------------
    # Memberships
    # ------------------------------------------------------------------

    async def get_user_roles(self, user_id: UUID) -> Result[list[str], DomainError]:
        roles = await self._user_repo.get_role_names(user_id)
        if roles is None:
            return Failure(error=_user_not_found(user_id))
        return Success(value=roles)

    async def add_roles(
        self, user_id: UUID, role_names: Sequence[str]
    ) -> Result[list[str], DomainError]:
        """Grant roles to a user.

        Returns:
            Success(names already held before the call), or Failure with
            NotFoundError for an unknown user or role.
        """
        if not await self._user_exists(user_id):
            return Failure(error=_user_not_found(user_id))

        missing = await self._unknown_roles(role_names)
        if missing:
            return Failure(error=_role_not_found(missing))

        already_held = await self._user_repo.add_roles(user_id, role_names)
        if already_held is None:
            return Failure(error=_user_not_found(user_id))

        self._logger.info(
            "user_roles_added",
            user_id=str(user_id),
            roles=list(role_names),
            already_held=already_held,
        )
        return Success(value=already_held)

    async def replace_roles(
        self, user_id: UUID, role_names: Sequence[str]
    ) -> Result[list[str], DomainError]:
        """Replace a user's role set.

        Returns:
            Success(new role names, sorted) or Failure(NotFoundError).
        """
        if not await self._user_exists(user_id):
            return Failure(error=_user_not_found(user_id))

        missing = await self._unknown_roles(role_names)
        if missing:
            return Failure(error=_role_not_found(missing))

        if not await self._user_repo.replace_roles(user_id, role_names):
            return Failure(error=_user_not_found(user_id))

        roles = sorted(set(role_names))
        self._logger.info("user_roles_replaced", user_id=str(user_id), roles=roles)
        return Success(value=roles)

    async def remove_role(
        self, user_id: UUID, role_name: str
    ) -> Result[None, DomainError]:
        if not await self._user_repo.remove_role(user_id, role_name):
            return Failure(error=_user_not_found(user_id))
        self._logger.info("user_role_removed", user_id=str(user_id), role=role_name)
        return Success(value=None)

    # ------------------------------------------------------------------
    # Role catalogue
    # ------------------------------------------------------------------

    async def list_roles(self) -> Sequence[Role]:
        return await self._role_repo.list_all()

    async def create_role(self, name: str) -> Result[Role, DomainError]:
        if await self._role_repo.exists(name):
            return Failure(
                error=ConflictError(
                    code=ErrorCode.ROLE_ALREADY_EXISTS,
                    message="Role already exists.",
                    resource_type="Role",
                    conflicting_field="name",
                )
            )
        role = await self._role_repo.save(name)
        self._logger.info("role_created", role=name)
        return Success(value=role)

    async def delete_role(self, name: str) -> Result[None, DomainError]:
        if not await self._role_repo.delete(name):
            return Failure(error=_role_not_found([name]))
        self._logger.info("role_deleted", role=name)
        return Success(value=None)

    # ------------------------------------------------------------------

    async def _user_exists(self, user_id: UUID) -> bool:
        return await self._user_repo.find_by_id(user_id) is not None

    async def _unknown_roles(self, role_names: Sequence[str]) -> list[str]:
        if not role_names:
            return []
        known = {role.name for role in await self._role_repo.find_by_names(role_names)}
        return [name for name in dict.fromkeys(role_names) if name not in known]

    async def _check_identity_free(
        self, user_name: str | None, email: str | None
    ) -> ConflictError | None:
        if email is not None and await self._user_repo.exists_by_email(email):
            return _identity_conflict("email")
        if user_name is not None and await self._user_repo.exists_by_user_name(
            user_name
        ):
            return _identity_conflict("userName")
        return None


def _identity_conflict(field: str) -> ConflictError:
    if field == "email":
        return ConflictError(
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
            message="Email is already registered.",
            resource_type="User",
            conflicting_field="email",
        )
    return ConflictError(
        code=ErrorCode.USER_ALREADY_EXISTS,
        message="User name is already taken.",
        resource_type="User",
        conflicting_field="userName",
    )


def _user_not_found(user_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.USER_NOT_FOUND,
        message="User not found with the provided id.",
        resource_type="User",
        resource_id=str(user_id),
    )


def _role_not_found(names: Sequence[str]) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.ROLE_NOT_FOUND,
        message=f"Role not found: {', '.join(names)}.",
        resource_type="Role",
        resource_id=", ".join(names),
    )
