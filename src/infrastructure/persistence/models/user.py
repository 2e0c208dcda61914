"""User database model for authentication.

This module defines the User model for storing user account information.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - failed_login_attempts: Track for account lockout
    - locked_until: Temporary account lockout after failed attempts
"""

from datetime import datetime
from uuid import UUID as PythonUUID, uuid4

from sqlalchemy import DateTime, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseMutableModel
from src.infrastructure.persistence.models.role import RoleModel, user_roles


class UserModel(BaseMutableModel):
    """User model for authentication and administration.

    Fields:
        id: UUID primary key (generated on insert)
        created_at, updated_at, version: From BaseMutableModel
        user_name: Unique login name
        full_name: Display name (nullable)
        email: Unique email address (lowercase, indexed)
        password_hash: Bcrypt hashed password (NEVER plaintext)
        failed_login_attempts: Counter for failed logins (resets on success)
        locked_until: Timestamp until which account is locked (nullable)

    Relationships:
        - roles: Many-to-many through ``user_roles`` (eager, selectin)
    """

    __tablename__ = "users"

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid4,
        nullable=False,
    )

    user_name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        unique=True,
        comment="Login name (unique)",
    )

    full_name: Mapped[str | None] = mapped_column(String(100), nullable=True)

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique, lowercase)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    failed_login_attempts: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Counter for failed login attempts (resets on success)",
    )

    locked_until: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        comment="Timestamp until which login is refused",
    )

    roles: Mapped[list[RoleModel]] = relationship(
        secondary=user_roles,
        lazy="selectin",
        order_by=RoleModel.name,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, user_name={self.user_name!r})>"
