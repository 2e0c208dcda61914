"""Route generator for the reference-data resources.

Bids, curve points, ratings, rules and trades share one contract, so
their five routes are generated from a ``ResourceMetadata`` entry
instead of being written out five times.

Contract per resource (``/bids`` shown):
    GET    /bids         - list (authenticated)
    GET    /bids/{id}    - fetch one (authenticated)
    POST   /bids         - create, 201 + Location (Admin)
    PUT    /bids/{id}    - full replace (Admin)
    DELETE /bids/{id}    - delete (Admin)

Usage:
    router = build_entity_router(
        ResourceMetadata(
            path="/bids",
            tag="Bids",
            display_name="Bid",
            request_model=BidRequest,
            response_model=BidResponse,
            get_service=get_bid_service,
        )
    )
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.services import EntityService
from src.core.config import settings
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import (
    AdminUser,
    AuthenticatedUser,
)
from src.presentation.routers.api.v1.errors import ErrorResponse, ErrorResponseBuilder
from src.schemas.common import MAX_INTEGER_COLUMN, MessageResponse

_AUTH_ERRORS: dict[int | str, dict[str, Any]] = {
    401: {"model": ErrorResponse, "description": "Missing or invalid token"},
}
_ADMIN_ERRORS: dict[int | str, dict[str, Any]] = {
    **_AUTH_ERRORS,
    403: {"model": ErrorResponse, "description": "Admin role required"},
}


@dataclass(frozen=True, kw_only=True)
class ResourceMetadata:
    """Declarative description of one reference-data resource.

    Attributes:
        path: Collection path relative to the API prefix ("/bids").
        tag: OpenAPI tag.
        display_name: Singular name used in messages ("Bid").
        request_model: Body schema with ``to_entity()``.
        response_model: Response schema with ``from_entity()``.
        get_service: FastAPI dependency returning the ``EntityService``.
    """

    path: str
    tag: str
    display_name: str
    request_model: type[Any]
    response_model: type[Any]
    get_service: Callable[..., Any]


def build_entity_router(metadata: ResourceMetadata) -> APIRouter:
    """Generate the five CRUD routes for a resource.

    Args:
        metadata: Resource description.

    Returns:
        APIRouter with the routes registered under ``metadata.path``.
    """
    router = APIRouter(prefix=metadata.path, tags=[metadata.tag])
    request_model = metadata.request_model
    response_model = metadata.response_model
    name = metadata.display_name
    Service = Annotated[EntityService[Any], Depends(metadata.get_service)]
    EntityId = Annotated[
        int, Path(ge=1, le=MAX_INTEGER_COLUMN, description=f"{name} id")
    ]

    async def list_entities(
        current_user: AuthenticatedUser,
        service: Service,
    ) -> list[Any]:
        entities = await service.list_all()
        return [response_model.from_entity(entity) for entity in entities]

    async def get_entity(
        request: Request,
        entity_id: EntityId,
        current_user: AuthenticatedUser,
        service: Service,
    ) -> Any:
        match await service.get(entity_id):
            case Success(value=entity):
                return response_model.from_entity(entity)
            case Failure(error=error):
                return ErrorResponseBuilder.from_domain_error(error, request)

    async def create_entity(
        request: Request,
        response: Response,
        body: request_model,  # type: ignore[valid-type]
        current_user: AdminUser,
        service: Service,
    ) -> Any:
        match await service.create(body.to_entity()):
            case Success(value=entity):
                response.headers["Location"] = (
                    f"{settings.api_base_url}{settings.api_v1_prefix}"
                    f"{metadata.path}/{entity.id}"
                )
                return response_model.from_entity(entity)
            case Failure(error=error):
                return ErrorResponseBuilder.from_domain_error(error, request)

    async def update_entity(
        request: Request,
        entity_id: EntityId,
        body: request_model,  # type: ignore[valid-type]
        current_user: AdminUser,
        service: Service,
    ) -> Any:
        result = await service.update(
            entity_id, body.to_entity(), expected_version=body.version
        )
        match result:
            case Success(value=entity):
                return response_model.from_entity(entity)
            case Failure(error=error):
                return ErrorResponseBuilder.from_domain_error(error, request)

    async def delete_entity(
        request: Request,
        entity_id: EntityId,
        current_user: AdminUser,
        service: Service,
    ) -> MessageResponse | JSONResponse:
        match await service.delete(entity_id):
            case Success():
                return MessageResponse(message=f"{name} deleted successfully.")
            case Failure(error=error):
                return ErrorResponseBuilder.from_domain_error(error, request)

    slug = metadata.path.strip("/").replace("-", "_")

    router.add_api_route(
        "",
        list_entities,
        methods=["GET"],
        response_model=list[response_model],  # type: ignore[valid-type]
        summary=f"List {metadata.tag.lower()}",
        operation_id=f"list_{slug}",
        responses=_AUTH_ERRORS,
    )
    router.add_api_route(
        "/{entity_id}",
        get_entity,
        methods=["GET"],
        response_model=response_model,
        summary=f"Get {name}",
        operation_id=f"get_{slug}",
        responses={**_AUTH_ERRORS, 404: {"model": ErrorResponse}},
    )
    router.add_api_route(
        "",
        create_entity,
        methods=["POST"],
        status_code=status.HTTP_201_CREATED,
        response_model=response_model,
        summary=f"Create {name}",
        operation_id=f"create_{slug}",
        responses={
            **_ADMIN_ERRORS,
            400: {"model": ErrorResponse},
            409: {"model": ErrorResponse},
        },
    )
    router.add_api_route(
        "/{entity_id}",
        update_entity,
        methods=["PUT"],
        response_model=response_model,
        summary=f"Replace {name}",
        operation_id=f"update_{slug}",
        responses={
            **_ADMIN_ERRORS,
            400: {"model": ErrorResponse},
            404: {"model": ErrorResponse},
            409: {"model": ErrorResponse},
        },
    )
    router.add_api_route(
        "/{entity_id}",
        delete_entity,
        methods=["DELETE"],
        response_model=MessageResponse,
        summary=f"Delete {name}",
        operation_id=f"delete_{slug}",
        responses={**_ADMIN_ERRORS, 404: {"model": ErrorResponse}},
    )

    return router
