"""Rule domain entity."""

from dataclasses import dataclass

from src.domain.entities.base import Entity


@dataclass(kw_only=True)
class Rule(Entity):
    """Named business rule with its JSON, template and SQL fragments.

    Attributes:
        name: Rule name (max 100 characters).
        description: Free text (max 500 characters, optional).
        json: JSON definition of the rule.
        template: Template applied by the rule.
        sql_str: Full SQL statement.
        sql_part: SQL fragment.
    """

    name: str
    json: str
    template: str
    sql_str: str
    sql_part: str
    description: str | None = None
