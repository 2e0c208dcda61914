"""Role and user-role membership models.

``user_roles`` is an explicit association table with a composite primary
key; rows cascade away when either the user or the role is deleted.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Table, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel

user_roles = Table(
    "user_roles",
    BaseModel.metadata,
    Column(
        "user_id",
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "role_id",
        Integer,
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)


class RoleModel(BaseModel):
    """Named role (case-sensitive, unique).

    Fields:
        id: Integer primary key
        name: Role name as carried in the ``roles`` token claim
        created_at: From BaseModel
    """

    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        unique=True,
        comment="Role name (case-sensitive)",
    )

    def __repr__(self) -> str:
        return f"<Role(id={self.id}, name={self.name!r})>"
