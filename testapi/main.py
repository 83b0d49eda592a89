"""
Main FastAPI application entry point.

Wires the trace middleware, RFC 9457 exception handlers and the users
router, and validates the CQRS registry at startup.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from testapi.application.cqrs.computed_views import validate_registry_consistency
from testapi.core.config import settings
from testapi.core.container import (
    check_handler_dependencies,
    get_database,
    get_logger,
)
from testapi.presentation.api.middleware.trace_middleware import TraceMiddleware
from testapi.presentation.api.v1 import v1_router
from testapi.presentation.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: validate the CQRS registry (fail fast on wiring defects)
    - Shutdown: dispose of database connections

    Raises:
        RuntimeError: If the registry is inconsistent.
    """
    logger = get_logger()

    errors = validate_registry_consistency(check_handler_dependencies)
    if errors:
        for error in errors:
            logger.error("cqrs_registry_invalid", problem=error)
        raise RuntimeError(f"CQRS registry validation failed: {'; '.join(errors)}")

    logger.info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    await get_database().close()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Lifecycle of synthetic users for automated test suites",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Request correlation
app.add_middleware(TraceMiddleware)

# RFC 9457 error responses
register_exception_handlers(app)

app.include_router(v1_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        dict: Health status indicator.
    """
    return {"status": "healthy"}
