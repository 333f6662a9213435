"""Main FastAPI application entry point.

Run with:
    uvicorn mintlite.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from mintlite.core.config import settings
from mintlite.core.container import get_database, get_logger
from mintlite.presentation.errors import register_exception_handlers
from mintlite.presentation.middleware import TraceMiddleware
from mintlite.presentation.routers import investments_router, system_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Create tables when DB_CREATE_TABLES is set
    - Shutdown: Dispose the connection pool

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    database = get_database()

    if settings.db_create_tables:
        await database.create_all()

    logger.info(
        "application_started",
        environment=settings.environment.value,
        market_data_provider=settings.market_data_provider,
    )

    yield

    await database.close()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Portfolio valuation engine for manually tracked holdings",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 7807 error responses)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(investments_router)
