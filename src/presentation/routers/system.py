"""System router for non-versioned application endpoints.

Root and health endpoints, outside the versioned API contract. Both are
public and side-effect free.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_database
from src.infrastructure.persistence.database import Database
from src.schemas import HealthResponse


system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Welcome message with API status and version.
    """
    return {
        "message": f"{settings.app_name} API",
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health", response_model=HealthResponse)
async def health(
    database: Annotated[Database, Depends(get_database)],
) -> JSONResponse:
    """Health check endpoint for monitoring and load balancers.

    Returns 200 when the database answers, 503 otherwise.
    """
    connected = await database.check_connection()
    body = HealthResponse(
        status="healthy" if connected else "degraded",
        database="connected" if connected else "unavailable",
        version=settings.app_version,
    )
    return JSONResponse(
        status_code=200 if connected else 503,
        content=body.model_dump(by_alias=True),
    )
