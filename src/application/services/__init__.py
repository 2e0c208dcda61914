"""Application services (CRUD orchestration over repositories)."""

from src.application.services.entity_service import EntityService
from src.application.services.user_service import UserService

__all__ = ["EntityService", "UserService"]
