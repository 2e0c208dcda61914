"""Generic SQLAlchemy repository for the reference-data entities.

Adapter for hexagonal architecture. One generic implementation of the
``EntityRepository`` port; concrete subclasses only bind the domain entity
class and the database model class.

Writes flush but never commit. The request-scoped session owns the
transaction (see ``src.core.container.get_db_session``).
"""

from collections.abc import Sequence
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.base import Entity
from src.domain.protocols.entity_repository import StaleRecordError
from src.infrastructure.persistence.base import ReferenceDataModel

EntityT = TypeVar("EntityT", bound=Entity)
ModelT = TypeVar("ModelT", bound=ReferenceDataModel)


class SqlAlchemyRepository(Generic[EntityT, ModelT]):
    """SQLAlchemy implementation of the EntityRepository protocol.

    Subclasses set ``entity_class`` and ``model_class``. Field mapping is
    by name: every business field of the entity has a column of the same
    name on the model.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> class BidRepository(SqlAlchemyRepository[Bid, BidModel]):
        ...     entity_class = Bid
        ...     model_class = BidModel
        >>> repo = BidRepository(session)
        >>> bid = await repo.find_by_id(42)
    """

    entity_class: ClassVar[type[Entity]]
    model_class: ClassVar[type[ReferenceDataModel]]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def list_all(self) -> Sequence[EntityT]:
        """Return every record ordered by id."""
        stmt = select(self.model_class).order_by(self.model_class.id)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def find_by_id(self, entity_id: int) -> EntityT | None:
        """Find a record by id.

        Returns:
            Domain entity if found, None otherwise.
        """
        model = await self._get_model(entity_id)
        if model is None:
            return None
        return self._to_domain(model)

    async def exists(self, entity_id: int) -> bool:
        """Check whether a record with this id is stored."""
        stmt = select(self.model_class.id).where(self.model_class.id == entity_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, entity: EntityT) -> EntityT:
        """Insert a new record; the store assigns the id.

        Returns:
            The stored entity with id, version and timestamps.
        """
        model = self._to_model(entity)
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._to_domain(model)

    async def update(
        self,
        entity_id: int,
        entity: EntityT,
        expected_version: int | None = None,
    ) -> EntityT | None:
        """Replace every business field of an existing record.

        Reads the current row, then issues a single
        ``UPDATE ... WHERE id = :id AND version = :expected`` that also
        bumps the version. Without ``expected_version`` the version just
        read is used, so a concurrent writer between read and write is
        still detected.

        Returns:
            The updated entity, or None if no record has this id.

        Raises:
            StaleRecordError: No row matched the expected version.
        """
        model = await self._get_model(entity_id)
        if model is None:
            return None

        expected = model.version if expected_version is None else expected_version
        stmt = (
            update(self.model_class)
            .where(
                self.model_class.id == entity_id,
                self.model_class.version == expected,
            )
            .values(**entity.field_values(), version=expected + 1)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            raise StaleRecordError(entity_id, expected)

        await self.session.refresh(model)
        return self._to_domain(model)

    async def delete(self, entity_id: int) -> bool:
        """Delete a record.

        Returns:
            True if a row was deleted, False if none had this id.
        """
        stmt = (
            delete(self.model_class)
            .where(self.model_class.id == entity_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def _get_model(self, entity_id: int) -> ModelT | None:
        stmt = select(self.model_class).where(self.model_class.id == entity_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()  # type: ignore[return-value]

    def _to_domain(self, model: ReferenceDataModel) -> EntityT:
        """Convert database model to domain entity.

        Args:
            model: SQLAlchemy model instance.

        Returns:
            Domain entity.
        """
        values: dict[str, Any] = {
            name: getattr(model, name) for name in self.entity_class.field_names()
        }
        return self.entity_class(  # type: ignore[return-value]
            id=model.id,
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
            **values,
        )

    def _to_model(self, entity: EntityT) -> ReferenceDataModel:
        """Convert domain entity to a new database model (id left unset)."""
        return self.model_class(**entity.field_values())
