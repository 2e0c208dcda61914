"""EntityRepository protocol for the reference-data entities.

One generic port shared by Bid, CurvePoint, Rating, Rule and Trade. Each
entity gets a concrete SQLAlchemy adapter in
``src.infrastructure.persistence.repositories``.

Write methods stage changes in the session (flush); the request-scoped
session commits when the request completes.
"""

from collections.abc import Sequence
from typing import Protocol, TypeVar

from src.domain.entities.base import Entity

EntityT = TypeVar("EntityT", bound=Entity)


class StaleRecordError(Exception):
    """Raised when an update's expected version no longer matches the store."""

    def __init__(self, entity_id: object, expected_version: int) -> None:
        super().__init__(
            f"Record {entity_id} is no longer at version {expected_version}"
        )
        self.entity_id = entity_id
        self.expected_version = expected_version


class EntityRepository(Protocol[EntityT]):
    """Repository protocol for integer-keyed reference entities.

    Example:
        >>> class SqlAlchemyBidRepository:
        ...     async def find_by_id(self, entity_id: int) -> Bid | None:
        ...         ...
    """

    async def list_all(self) -> Sequence[EntityT]:
        """Return every stored record ordered by id."""
        ...

    async def find_by_id(self, entity_id: int) -> EntityT | None:
        """Find a record by id.

        Returns:
            Entity if found, None otherwise.
        """
        ...

    async def exists(self, entity_id: int) -> bool:
        """Check whether a record with this id is stored."""
        ...

    async def save(self, entity: EntityT) -> EntityT:
        """Insert a new record.

        The store assigns the id. Any id already on the entity is ignored.

        Returns:
            The stored entity with id, version and timestamps filled in.
        """
        ...

    async def update(
        self,
        entity_id: int,
        entity: EntityT,
        expected_version: int | None = None,
    ) -> EntityT | None:
        """Replace the data fields of an existing record.

        Args:
            entity_id: Id of the record to update.
            entity: Entity carrying the new field values.
            expected_version: When given, the update only applies if the
                stored version still matches.

        Returns:
            The updated entity, or None if no record has this id.

        Raises:
            StaleRecordError: The stored version differs from expected_version.
        """
        ...

    async def delete(self, entity_id: int) -> bool:
        """Delete a record.

        Returns:
            True if a record was deleted, False if none had this id.
        """
        ...
