"""Rule request and response schemas.

The ``json`` wire field is held as ``json_value`` in Python because
``BaseModel`` already defines a ``json`` attribute.
"""

from pydantic import Field

from src.domain.entities.rule import Rule
from src.schemas.common import EntityRequest, EntityResponse


class RuleRequest(EntityRequest):
    """Create/replace payload for a rule."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    json_value: str = Field(..., alias="json", min_length=1)
    template: str = Field(..., min_length=1)
    sql_str: str = Field(..., min_length=1)
    sql_part: str = Field(..., min_length=1)

    def to_entity(self) -> Rule:
        return Rule(
            id=self.id,
            name=self.name,
            description=self.description,
            json=self.json_value,
            template=self.template,
            sql_str=self.sql_str,
            sql_part=self.sql_part,
        )


class RuleResponse(EntityResponse):
    """Single rule."""

    name: str
    description: str | None = None
    json_value: str = Field(..., alias="json")
    template: str
    sql_str: str
    sql_part: str

    @classmethod
    def from_entity(cls, rule: Rule) -> "RuleResponse":
        return cls(
            id=rule.id,  # type: ignore[arg-type]
            version=rule.version,
            created_at=rule.created_at,
            updated_at=rule.updated_at,
            name=rule.name,
            description=rule.description,
            json_value=rule.json,
            template=rule.template,
            sql_str=rule.sql_str,
            sql_part=rule.sql_part,
        )
