"""Request middleware and authentication dependencies."""

from src.presentation.routers.api.middleware.auth_dependencies import (
    AdminUser,
    AuthenticatedUser,
    CurrentUser,
    get_current_user,
    require_role,
)
from src.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)

__all__ = [
    "AdminUser",
    "AuthenticatedUser",
    "CurrentUser",
    "TraceMiddleware",
    "get_current_user",
    "get_trace_id",
    "require_role",
]
