"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from src.catalog.api.http.deps import get_app_config, get_database_service
from src.catalog.core.services import DbSessionService
from src.catalog.runtime.config.config_data import ConfigData

router = APIRouter(prefix="/health", tags=["health"])


def _database_type(config: ConfigData) -> str:
    return "sqlite" if config.database.is_sqlite else "postgresql"


@router.get("")
async def health(config: ConfigData = Depends(get_app_config)) -> dict[str, str]:
    """Liveness probe: 200 as long as the process is running."""
    return {"status": "healthy", "service": config.app.name}


@router.get("/ready", response_model=None)
def readiness(
    config: ConfigData = Depends(get_app_config),
    database_service: DbSessionService = Depends(get_database_service),
) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 200 when the database answers, 503 otherwise."""
    db_healthy = database_service.health_check()
    response = {
        "status": "ready" if db_healthy else "not_ready",
        "environment": config.app.environment,
        "checks": {
            "database": {
                "status": "healthy" if db_healthy else "unhealthy",
                "type": _database_type(config),
            }
        },
    }
    if not db_healthy:
        return JSONResponse(status_code=503, content=response)
    return response


@router.get("/database", response_model=None)
def health_database(
    config: ConfigData = Depends(get_app_config),
    database_service: DbSessionService = Depends(get_database_service),
) -> dict[str, Any] | JSONResponse:
    """Database health check with connection pool status."""
    try:
        healthy = database_service.health_check()
        pool_status = database_service.get_pool_status()
    except Exception as e:
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "error": str(e),
                "error_type": type(e).__name__,
            },
        )
    return {
        "status": "healthy" if healthy else "unhealthy",
        "type": _database_type(config),
        "pool": pool_status,
    }
