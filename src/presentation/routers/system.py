"""System router for non-versioned application endpoints.

Provides liveness and readiness checks for load balancers. These endpoints
are not part of the transaction API contract and write no access records.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.core.container import get_cache, get_database
from src.core.result import Success
from src.domain.protocols.cache_protocol import CacheProtocol
from src.infrastructure.persistence.database import Database

system_router = APIRouter(tags=["System"])


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers.

    Returns:
        dict[str, str]: Health status indicator.
    """
    return {"status": "healthy"}


@system_router.get("/health/ready")
async def readiness(
    cache: CacheProtocol = Depends(get_cache),
    database: Database = Depends(get_database),
) -> JSONResponse:
    """Readiness check: Redis and PostgreSQL must both answer.

    Returns:
        JSONResponse: 200 with per-component status, or 503 if any
            component is down.
    """
    cache_ok = isinstance(await cache.ping(), Success)
    database_ok = await database.check_connection()

    ready = cache_ok and database_ok
    return JSONResponse(
        status_code=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "ready" if ready else "unavailable",
            "cache": "up" if cache_ok else "down",
            "database": "up" if database_ok else "down",
        },
    )
