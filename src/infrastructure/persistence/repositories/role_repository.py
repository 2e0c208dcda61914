"""RoleRepository - SQLAlchemy implementation of RoleRepository protocol."""

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.role import Role
from src.infrastructure.persistence.models.role import RoleModel, user_roles


class RoleRepository:
    """SQLAlchemy adapter for the role catalogue.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_all(self) -> Sequence[Role]:
        stmt = select(RoleModel).order_by(RoleModel.name)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def find_by_name(self, name: str) -> Role | None:
        role_model = await self._get_model(name)
        if role_model is None:
            return None
        return self._to_domain(role_model)

    async def find_by_names(self, names: Sequence[str]) -> Sequence[Role]:
        if not names:
            return []
        stmt = select(RoleModel).where(RoleModel.name.in_(list(names)))
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def exists(self, name: str) -> bool:
        stmt = select(RoleModel.id).where(RoleModel.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, name: str) -> Role:
        """Create a role.

        Returns:
            Role with its store-assigned id.
        """
        role_model = RoleModel(name=name)
        self.session.add(role_model)
        await self.session.flush()
        return self._to_domain(role_model)

    async def delete(self, name: str) -> bool:
        """Delete a role and every membership referencing it.

        Returns:
            True if deleted, False if no role has this name.
        """
        role_model = await self._get_model(name)
        if role_model is None:
            return False

        # Memberships go first; SQLite does not enforce ON DELETE CASCADE
        # unless foreign keys are switched on for the connection.
        await self.session.execute(
            delete(user_roles).where(user_roles.c.role_id == role_model.id)
        )
        await self.session.delete(role_model)
        await self.session.flush()
        return True

    async def _get_model(self, name: str) -> RoleModel | None:
        stmt = select(RoleModel).where(RoleModel.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _to_domain(role_model: RoleModel) -> Role:
        return Role(id=role_model.id, name=role_model.name)
