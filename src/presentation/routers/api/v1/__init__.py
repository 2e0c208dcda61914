"""API v1 routers.

RESTful resource-based endpoints. Reference-data routes are generated
from ``REFERENCE_DATA_RESOURCES``; auth, users and roles are written out.

Resources:
    /api/v1/bids           - Bids (read: authenticated, write: Admin)
    /api/v1/curve-points   - Curve points
    /api/v1/ratings        - Ratings
    /api/v1/rules          - Rules
    /api/v1/trades         - Trades
    /api/v1/auth           - Register, login, logout
    /api/v1/users          - User administration (Admin)
    /api/v1/roles          - Role catalogue (Admin)
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.auth import auth_router
from src.presentation.routers.api.v1.reference_data import reference_data_routers
from src.presentation.routers.api.v1.roles import roles_router
from src.presentation.routers.api.v1.users import users_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)

for router in reference_data_routers:
    v1_router.include_router(router)
v1_router.include_router(auth_router)
v1_router.include_router(users_router)
v1_router.include_router(roles_router)

__all__ = [
    "v1_router",
]
