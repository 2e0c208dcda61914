"""HTTP routers.

- ``system``: non-versioned root and health endpoints
- ``api.v1``: the versioned REST API
"""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]
