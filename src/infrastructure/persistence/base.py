"""Base model and mixins for all database entities.

This module provides:
- BaseModel: Base class for ALL models (provides created_at)
- TimestampMixin: Internal mixin that adds updated_at
- VersionMixin: Internal mixin that adds the optimistic-concurrency version
- BaseMutableModel: Base for updatable models (combines the above)
- ReferenceDataModel: Base for the integer-keyed reference entities

Following hexagonal architecture:
- This is an infrastructure concern (database implementation detail)
- Domain entities should NOT inherit from this
- Domain entities are mapped to/from database models by repositories

Architecture:
    BaseModel (created_at)
        ↑
        ├── BaseMutableModel (+ updated_at, version)
        │   ├── ReferenceDataModel (+ integer id)
        │   │   ├── BidModel, CurvePointModel, RatingModel
        │   │   └── RuleModel, TradeModel
        │   └── UserModel (UUID id)
        │
        └── RoleModel (integer id, immutable)

Identifiers differ per table, so each concrete model (or
ReferenceDataModel) declares its own ``id`` column.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Base class for all database models (mutable and immutable).

    Provides ``created_at``, set by the database on INSERT.

    This is an infrastructure concern - domain entities should not
    inherit from or depend on this class.
    """

    __abstract__ = True

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),  # Database sets this on INSERT
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: String showing class name and ID.
        """
        return f"<{self.__class__.__name__}(id={getattr(self, 'id', None)})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging/logging)."""
        return {
            "id": str(getattr(self, "id", None)),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class TimestampMixin:
    """Mixin for mutable models that track updates.

    Note:
        This is typically used via BaseMutableModel, not directly.
    """

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),  # Database sets this on INSERT
        onupdate=func.now(),  # Refreshed on every UPDATE
    )

    def to_dict(self) -> dict[str, Any]:
        """Extend BaseModel.to_dict() to include updated_at."""
        data: dict[str, Any] = super().to_dict()  # type: ignore[misc]
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data


class VersionMixin:
    """Mixin adding the version column compared on every update.

    Repositories bump the version explicitly in their UPDATE statement
    (``WHERE version = :expected``), so no mapper-level version_id_col
    is configured.
    """

    version: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=1,
        server_default="1",
    )


class BaseMutableModel(VersionMixin, TimestampMixin, BaseModel):
    """Base class for mutable database models.

    Provides:
        - created_at: Timestamp when created (from BaseModel)
        - updated_at: Timestamp when last updated (from TimestampMixin)
        - version: Optimistic-concurrency counter (from VersionMixin)
    """

    __abstract__ = True


class ReferenceDataModel(BaseMutableModel):
    """Base class for the reference-data tables.

    Adds an auto-incrementing integer primary key assigned by the store.

    Usage:
        class BidModel(ReferenceDataModel):
            __tablename__ = "bids"
            account: Mapped[str] = mapped_column(String(50))
            # Has: id, version, created_at, updated_at
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
