"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).
JSON field names are camelCase; snake_case is accepted on input.

Usage:
    from src.schemas import BidRequest, BidResponse
"""

from src.schemas.auth_schemas import (
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
)
from src.schemas.bid_schemas import BidRequest, BidResponse
from src.schemas.common import HealthResponse, MessageResponse
from src.schemas.curve_point_schemas import CurvePointRequest, CurvePointResponse
from src.schemas.rating_schemas import RatingRequest, RatingResponse
from src.schemas.rule_schemas import RuleRequest, RuleResponse
from src.schemas.trade_schemas import TradeRequest, TradeResponse
from src.schemas.user_schemas import (
    AddRolesResponse,
    RoleCreateRequest,
    RoleResponse,
    UserCreateRequest,
    UserResponse,
    UserRolesRequest,
    UserRolesResponse,
    UserUpdateRequest,
)

__all__ = [
    # Auth
    "LoginRequest",
    "RegisterRequest",
    "RegisterResponse",
    "TokenResponse",
    # Common
    "HealthResponse",
    "MessageResponse",
    # Reference data
    "BidRequest",
    "BidResponse",
    "CurvePointRequest",
    "CurvePointResponse",
    "RatingRequest",
    "RatingResponse",
    "RuleRequest",
    "RuleResponse",
    "TradeRequest",
    "TradeResponse",
    # Users and roles
    "AddRolesResponse",
    "RoleCreateRequest",
    "RoleResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserRolesRequest",
    "UserRolesResponse",
    "UserUpdateRequest",
]
