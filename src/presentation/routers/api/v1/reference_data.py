"""Reference-data resources: bids, curve points, ratings, rules, trades.

Each entry feeds ``build_entity_router``; see ``entity_routes`` for the
shared contract.
"""

from src.core.container import (
    get_bid_service,
    get_curve_point_service,
    get_rating_service,
    get_rule_service,
    get_trade_service,
)
from src.presentation.routers.api.v1.entity_routes import (
    ResourceMetadata,
    build_entity_router,
)
from src.schemas import (
    BidRequest,
    BidResponse,
    CurvePointRequest,
    CurvePointResponse,
    RatingRequest,
    RatingResponse,
    RuleRequest,
    RuleResponse,
    TradeRequest,
    TradeResponse,
)

REFERENCE_DATA_RESOURCES: list[ResourceMetadata] = [
    ResourceMetadata(
        path="/bids",
        tag="Bids",
        display_name="Bid",
        request_model=BidRequest,
        response_model=BidResponse,
        get_service=get_bid_service,
    ),
    ResourceMetadata(
        path="/curve-points",
        tag="Curve Points",
        display_name="CurvePoint",
        request_model=CurvePointRequest,
        response_model=CurvePointResponse,
        get_service=get_curve_point_service,
    ),
    ResourceMetadata(
        path="/ratings",
        tag="Ratings",
        display_name="Rating",
        request_model=RatingRequest,
        response_model=RatingResponse,
        get_service=get_rating_service,
    ),
    ResourceMetadata(
        path="/rules",
        tag="Rules",
        display_name="Rule",
        request_model=RuleRequest,
        response_model=RuleResponse,
        get_service=get_rule_service,
    ),
    ResourceMetadata(
        path="/trades",
        tag="Trades",
        display_name="Trade",
        request_model=TradeRequest,
        response_model=TradeResponse,
        get_service=get_trade_service,
    ),
]

reference_data_routers = [
    build_entity_router(resource) for resource in REFERENCE_DATA_RESOURCES
]
