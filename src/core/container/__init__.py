"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_db_session, get_bid_service, ...

The container is organized into modules by concern:
- infrastructure: Database, session, security services, logging
- repositories: User and role repository factories
- services: Entity CRUD services and user administration
- auth_handlers: Register, login and logout handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_password_service,
    get_token_service,
)

# Repositories
from src.core.container.repositories import (
    get_role_repository,
    get_user_repository,
)

# Services
from src.core.container.services import (
    get_bid_service,
    get_curve_point_service,
    get_rating_service,
    get_rule_service,
    get_trade_service,
    get_user_service,
)

# Auth handlers
from src.core.container.auth_handlers import (
    get_login_user_handler,
    get_logout_user_handler,
    get_register_user_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    "get_password_service",
    "get_token_service",
    # Repositories
    "get_role_repository",
    "get_user_repository",
    # Services
    "get_bid_service",
    "get_curve_point_service",
    "get_rating_service",
    "get_rule_service",
    "get_trade_service",
    "get_user_service",
    # Auth handlers
    "get_login_user_handler",
    "get_logout_user_handler",
    "get_register_user_handler",
]
