"""Rule database model."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import ReferenceDataModel


class RuleModel(ReferenceDataModel):
    """Named rule with its JSON, template and SQL fragments.

    The free-form fields are stored as TEXT; the API limits only
    ``name`` and ``description``.
    """

    __tablename__ = "rules"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    json: Mapped[str] = mapped_column(Text, nullable=False)
    template: Mapped[str] = mapped_column(Text, nullable=False)
    sql_str: Mapped[str] = mapped_column(Text, nullable=False)
    sql_part: Mapped[str] = mapped_column(Text, nullable=False)
