"""Shared base for reference-data entities.

Every persisted record carries the same bookkeeping fields: a store-assigned
identifier, an optimistic-concurrency version and the audit timestamps set
by the database. Concrete entities only declare their business fields.
"""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any

# Fields owned by the store, never copied from a request payload
BOOKKEEPING_FIELDS = frozenset({"id", "version", "created_at", "updated_at"})


@dataclass(kw_only=True)
class Entity:
    """Base class for reference-data entities.

    Attributes:
        id: Store-assigned identifier (None until persisted).
        version: Optimistic-concurrency token, incremented on every update.
        created_at: Timestamp when the row was inserted (set by the store).
        updated_at: Timestamp of the last update (set by the store).
    """

    id: int | None = None
    version: int = 1
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Names of the business fields (everything but bookkeeping).

        Returns:
            tuple[str, ...]: Field names in declaration order.
        """
        return tuple(f.name for f in fields(cls) if f.name not in BOOKKEEPING_FIELDS)

    def field_values(self) -> dict[str, Any]:
        """Business field values, used for full-replace writes.

        Returns:
            dict[str, Any]: Mapping of field name to current value.
        """
        return {name: getattr(self, name) for name in self.field_names()}
