"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET {base}/health/ always returns 200 if process is up (liveness)
    - GET {base}/health/ready returns 503 if database is unreachable (readiness)
    - No authentication: probes run before any caller exists
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.config import get_settings
import app.infrastructure.database as database

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": "travel-booking-api",
        "version": settings.api_version,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe — includes database connectivity."""
    db_manager = database.db_manager
    db_ok = await db_manager.health_check() if db_manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
