"""Generic CRUD service for the reference-data entities.

One service class serves Bid, CurvePoint, Rating, Rule and Trade; the
container builds an instance per entity with its repository and display
name. Expected outcomes (missing row, duplicate id, stale version, id
mismatch) come back as ``Failure``; store errors propagate.

Usage:
    service = EntityService(BidRepository(session), "Bid", logger)

    match await service.get(42):
        case Success(value=bid):
            ...
        case Failure(error=NotFoundError()):
            ...
"""

from collections.abc import Sequence
from typing import Generic, TypeVar

from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.base import Entity
from src.domain.protocols import (
    EntityRepository,
    LoggerProtocol,
    StaleRecordError,
)

EntityT = TypeVar("EntityT", bound=Entity)


class EntityService(Generic[EntityT]):
    """CRUD orchestration over an ``EntityRepository``.

    Args:
        repository: Repository for the entity.
        resource_name: Display name used in messages and logs ("Bid").
        logger: Structured logger.
    """

    def __init__(
        self,
        repository: EntityRepository[EntityT],
        resource_name: str,
        logger: LoggerProtocol,
    ) -> None:
        self._repository = repository
        self._resource_name = resource_name
        self._logger = logger.bind(resource=resource_name)

    @property
    def resource_name(self) -> str:
        return self._resource_name

    async def list_all(self) -> Sequence[EntityT]:
        """Return every record."""
        self._logger.info("entities_listed")
        return await self._repository.list_all()

    async def get(self, entity_id: int) -> Result[EntityT, DomainError]:
        """Return one record.

        Returns:
            Success(entity) or Failure(NotFoundError).
        """
        entity = await self._repository.find_by_id(entity_id)
        if entity is None:
            return Failure(error=self._not_found(entity_id))
        return Success(value=entity)

    async def create(self, entity: EntityT) -> Result[EntityT, DomainError]:
        """Store a new record.

        A client-supplied id is only used to detect duplicates: if a row
        with that id exists the request conflicts, otherwise the store
        assigns a fresh id.

        Returns:
            Success(stored entity) or Failure(ConflictError).
        """
        if entity.id is not None and await self._repository.exists(entity.id):
            self._logger.warning("entity_create_conflict", entity_id=entity.id)
            return Failure(
                error=ConflictError(
                    code=ErrorCode.RESOURCE_ALREADY_EXISTS,
                    message=f"{self._resource_name} already exists with the provided id.",
                    resource_type=self._resource_name,
                    conflicting_field="id",
                )
            )

        created = await self._repository.save(entity)
        self._logger.info("entity_created", entity_id=created.id)
        return Success(value=created)

    async def update(
        self,
        entity_id: int,
        entity: EntityT,
        expected_version: int | None = None,
    ) -> Result[EntityT, DomainError]:
        """Replace every business field of a record.

        Args:
            entity_id: Id from the route.
            entity: New field values; ``entity.id`` (from the body), when
                set, must equal ``entity_id``.
            expected_version: Optional version the client last read.

        Returns:
            Success(updated entity), or Failure with ValidationError (id
            mismatch), NotFoundError or ConflictError (stale version).
        """
        if entity.id is not None and entity.id != entity_id:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.ID_MISMATCH,
                    message="The provided id does not match the id in the request.",
                    field="id",
                )
            )

        try:
            updated = await self._repository.update(
                entity_id, entity, expected_version=expected_version
            )
        except StaleRecordError as exc:
            self._logger.warning(
                "entity_update_conflict",
                entity_id=entity_id,
                expected_version=exc.expected_version,
            )
            return Failure(
                error=ConflictError(
                    code=ErrorCode.RESOURCE_CONFLICT,
                    message=f"{self._resource_name} was modified by another request.",
                    resource_type=self._resource_name,
                    conflicting_field="version",
                )
            )

        if updated is None:
            return Failure(error=self._not_found(entity_id))

        self._logger.info("entity_updated", entity_id=entity_id, version=updated.version)
        return Success(value=updated)

    async def delete(self, entity_id: int) -> Result[None, DomainError]:
        """Delete a record.

        Returns:
            Success(None) or Failure(NotFoundError).
        """
        if not await self._repository.delete(entity_id):
            return Failure(error=self._not_found(entity_id))

        self._logger.info("entity_deleted", entity_id=entity_id)
        return Success(value=None)

    def _not_found(self, entity_id: int) -> NotFoundError:
        return NotFoundError(
            code=ErrorCode.RESOURCE_NOT_FOUND,
            message=f"{self._resource_name} not found with the provided id.",
            resource_type=self._resource_name,
            resource_id=str(entity_id),
        )
