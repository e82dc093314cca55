"""
Main FastAPI application entry point.

Initializes the FastAPI application, wires middleware, exception handlers
and routers, and manages the lifetime of shared connection pools.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.core.container import get_cache, get_database, get_logger
from src.presentation.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.api.v1 import api_router
from src.presentation.api.v1.errors import register_exception_handlers
from src.presentation.routers.system import system_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: log configuration summary
    - Shutdown: close Redis and database pools
    """
    logger = get_logger()
    logger.info(
        "application starting",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment.value,
    )

    yield

    await get_cache().close()
    await get_database().close()
    logger.info("application stopped")


app = FastAPI(
    title=settings.app_name,
    description="Read-only transaction history API for external services",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers ({meta, data} error envelope)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("src.main:app", host=settings.host, port=settings.port)
