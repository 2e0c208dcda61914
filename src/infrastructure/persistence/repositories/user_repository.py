"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel, including the
role memberships held in ``user_roles``.
"""

from collections.abc import Sequence
from datetime import UTC
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.user import User
from src.domain.protocols.entity_repository import StaleRecordError
from src.domain.protocols.user_repository import DuplicateUserError
from src.infrastructure.persistence.models.role import RoleModel
from src.infrastructure.persistence.models.user import UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from UserRepository protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email("user@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def list_all(self) -> Sequence[User]:
        """Return every user ordered by user name."""
        stmt = select(UserModel).order_by(UserModel.user_name)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            Domain User entity if found, None otherwise.
        """
        user_model = await self._load(user_id)
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive).

        Args:
            email: User's email address.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(func.lower(UserModel.email) == email.lower())
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def exists_by_email(self, email: str) -> bool:
        """Check if user with email exists (case-insensitive)."""
        stmt = select(UserModel.id).where(func.lower(UserModel.email) == email.lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def exists_by_user_name(self, user_name: str) -> bool:
        """Check if user with this user name exists."""
        stmt = select(UserModel.id).where(UserModel.user_name == user_name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, user: User) -> User:
        """Create new user in database.

        Args:
            user: Domain User entity to persist (id ignored).

        Returns:
            Stored user with generated id and timestamps.
        """
        user_model = UserModel(
            user_name=user.user_name,
            full_name=user.full_name,
            email=user.email.lower(),
            password_hash=user.password_hash,
            failed_login_attempts=user.failed_login_attempts,
            locked_until=user.locked_until,
            roles=[],
        )
        self.session.add(user_model)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise await self._duplicate(exc) from exc

        return self._to_domain(await self._reload(user_model.id))

    async def update(
        self, user: User, expected_version: int | None = None
    ) -> User | None:
        """Replace profile fields (name, email, password hash) of a user.

        Returns:
            Updated user, or None if the user does not exist.

        Raises:
            StaleRecordError: No row matched the expected version.
        """
        if user.id is None:
            return None
        user_model = await self._load(user.id)
        if user_model is None:
            return None

        expected = (
            user_model.version if expected_version is None else expected_version
        )
        stmt = (
            update(UserModel)
            .where(UserModel.id == user.id, UserModel.version == expected)
            .values(
                user_name=user.user_name,
                full_name=user.full_name,
                email=user.email.lower(),
                password_hash=user.password_hash,
                version=expected + 1,
            )
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise await self._duplicate(exc) from exc
        if result.rowcount == 0:
            raise StaleRecordError(user.id, expected)

        return self._to_domain(await self._reload(user.id))

    async def record_login_state(self, user: User) -> None:
        """Persist the failed-login counter and lock (no version bump)."""
        stmt = (
            update(UserModel)
            .where(UserModel.id == user.id)
            .values(
                failed_login_attempts=user.failed_login_attempts,
                locked_until=user.locked_until,
            )
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)

    async def delete(self, user_id: UUID) -> bool:
        """Delete user and its role memberships.

        Returns:
            True if deleted, False if the user does not exist.
        """
        user_model = await self._load(user_id)
        if user_model is None:
            return False

        await self.session.delete(user_model)
        await self.session.flush()
        return True

    async def get_role_names(self, user_id: UUID) -> list[str] | None:
        """Return the user's role names, or None if the user does not exist."""
        user_model = await self._load(user_id)
        if user_model is None:
            return None
        return [role.name for role in user_model.roles]

    async def add_roles(
        self, user_id: UUID, role_names: Sequence[str]
    ) -> list[str] | None:
        """Add roles to a user, skipping those already held.

        Names with no matching role row are ignored; callers check the
        catalogue first.

        Returns:
            Requested names the user already held, or None if the user
            does not exist.
        """
        user_model = await self._load(user_id)
        if user_model is None:
            return None

        held = {role.name for role in user_model.roles}
        already_held = [name for name in dict.fromkeys(role_names) if name in held]
        missing = [name for name in dict.fromkeys(role_names) if name not in held]

        if missing:
            user_model.roles.extend(await self._roles_named(missing))
            await self.session.flush()

        return already_held

    async def replace_roles(self, user_id: UUID, role_names: Sequence[str]) -> bool:
        """Replace the user's role set wholesale.

        Returns:
            False if the user does not exist.
        """
        user_model = await self._load(user_id)
        if user_model is None:
            return False

        user_model.roles = list(await self._roles_named(role_names))
        await self.session.flush()
        return True

    async def remove_role(self, user_id: UUID, role_name: str) -> bool:
        """Remove one role from a user (no-op if not held).

        Returns:
            False if the user does not exist.
        """
        user_model = await self._load(user_id)
        if user_model is None:
            return False

        remaining = [role for role in user_model.roles if role.name != role_name]
        if len(remaining) != len(user_model.roles):
            user_model.roles = remaining
            await self.session.flush()
        return True

    async def _duplicate(self, exc: IntegrityError) -> DuplicateUserError:
        # The failed statement aborts the transaction on PostgreSQL; roll it
        # back so the request session can still close cleanly. Nothing else
        # has been written by the user writes that reach this point.
        await self.session.rollback()
        # SQLite names the column, PostgreSQL names the unique index
        message = str(exc.orig)
        if "users.email" in message or "ix_users_email" in message:
            return DuplicateUserError("email")
        return DuplicateUserError("userName")

    async def _load(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def _reload(self, user_id: UUID) -> UserModel:
        # Re-read server-side defaults and roles into the identity map
        stmt = (
            select(UserModel)
            .where(UserModel.id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def _roles_named(self, role_names: Sequence[str]) -> Sequence[RoleModel]:
        if not role_names:
            return []
        stmt = select(RoleModel).where(RoleModel.name.in_(list(role_names)))
        result = await self.session.execute(stmt)
        return result.scalars().all()

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity.

        Args:
            user_model: SQLAlchemy UserModel instance.

        Returns:
            Domain User entity.
        """
        locked_until = user_model.locked_until
        if locked_until is not None and locked_until.tzinfo is None:
            # SQLite drops the offset; values are always written in UTC
            locked_until = locked_until.replace(tzinfo=UTC)

        return User(
            id=user_model.id,
            user_name=user_model.user_name,
            email=user_model.email,
            password_hash=user_model.password_hash,
            full_name=user_model.full_name,
            roles=[role.name for role in user_model.roles],
            failed_login_attempts=user_model.failed_login_attempts,
            locked_until=locked_until,
            version=user_model.version,
            created_at=user_model.created_at,
            updated_at=user_model.updated_at,
        )
