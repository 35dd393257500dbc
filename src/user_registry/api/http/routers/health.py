"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from user_registry.api.http.app_data import ApplicationDependencies
from user_registry.api.http.deps import get_app_dependencies
from user_registry.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Liveness probe: 200 as long as the process is serving requests."""
    return {"status": "healthy", "service": "user-registry"}


@router.get("/ready", response_model=None)
def readiness(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 503 unless the database answers."""
    config = get_config()
    database_service = app_deps.database_service

    healthy = database_service.health_check()
    response = {
        "status": "ready" if healthy else "not_ready",
        "environment": config.app.environment,
        "checks": {
            "database": {
                "status": "healthy" if healthy else "unhealthy",
                "type": "sqlite" if config.database.is_sqlite else "postgresql",
                "pool": database_service.get_pool_status(),
            }
        },
    }

    if not healthy:
        return JSONResponse(status_code=503, content=response)
    return response
