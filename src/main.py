"""
Main FastAPI application entry point.

Builds the application: trace middleware, global exception handlers, the
system endpoints and the versioned API router. The database engine is
created lazily by the container and disposed on shutdown.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.core.container import get_database, get_logger
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: log the environment
    - Shutdown: dispose the connection pool
    """
    get_logger().info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    await get_database().close()
    get_logger().info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Trading reference-data API (bids, curve points, ratings, rules, trades)",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (JSON error bodies)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)
