"""Health check endpoints router for monitoring service availability."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from product_catalog.api.http.deps import get_database_service
from product_catalog.core.services import DbSessionService
from product_catalog.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])

Database = Annotated[DbSessionService, Depends(get_database_service)]


@router.get("")
def health() -> dict[str, str]:
    """Liveness probe: 200 OK as long as the process is serving requests."""
    return {"status": "healthy", "service": "product-catalog"}


@router.get("/ready", response_model=None)
def readiness(database: Database) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 200 when the database answers, 503 otherwise."""
    config = get_config()
    db_healthy = database.health_check()
    response = {
        "status": "ready" if db_healthy else "not_ready",
        "environment": config.app.environment,
        "checks": {
            "database": {
                "status": "healthy" if db_healthy else "unhealthy",
                "type": config.database.backend,
            }
        },
    }
    if not db_healthy:
        return JSONResponse(status_code=503, content=response)
    return response


@router.get("/database", response_model=None)
def health_database(database: Database) -> dict[str, Any] | JSONResponse:
    """Database-specific health check with connection pool status."""
    healthy = database.health_check()
    body = {
        "status": "healthy" if healthy else "unhealthy",
        "type": get_config().database.backend,
        "pool": database.get_pool_status(),
    }
    if not healthy:
        return JSONResponse(status_code=503, content=body)
    return body
