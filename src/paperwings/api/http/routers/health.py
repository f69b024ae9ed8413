"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from src.paperwings.api.http.app_data import ApplicationDependencies
from src.paperwings.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health() -> dict[str, str]:
    """Basic health check endpoint - checks if app is running.

    This is a liveness probe that returns 200 OK as long as the application
    process is running. It does not check the database.
    """
    return {"status": "healthy", "service": "api"}


@router.get("/ready", response_model=None)
def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Readiness check: database connectivity plus connection pool status.

    Returns 200 when the database answers, 503 otherwise.
    """
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    config = get_config()
    database_service = app_deps.database_service

    healthy = database_service.health_check()
    response = {
        "status": "ready" if healthy else "not_ready",
        "environment": config.app.environment,
        "checks": {
            "database": {
                "status": "healthy" if healthy else "unhealthy",
                "type": database_service.engine.dialect.name,
                "pool": database_service.get_pool_status(),
            }
        },
    }

    if not healthy:
        return JSONResponse(status_code=503, content=response)

    return response
