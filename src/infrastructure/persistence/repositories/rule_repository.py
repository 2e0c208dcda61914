"""RuleRepository - SQLAlchemy adapter for rule records."""

from src.domain.entities.rule import Rule
from src.infrastructure.persistence.models.rule import RuleModel
from src.infrastructure.persistence.repositories.base_repository import (
    SqlAlchemyRepository,
)


class RuleRepository(SqlAlchemyRepository[Rule, RuleModel]):
    """Rule definitions (``rules`` table)."""

    entity_class = Rule
    model_class = RuleModel
