"""
Health check route.
"""

import time

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
import structlog

from .. import __version__
from ..database import check_database_connection
from ..models.responses import ComponentHealth, HealthResponse

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["monitoring"])

_started_at = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Report service and database health. Public."""

    database_ok = check_database_connection()

    health = HealthResponse(
        success=database_ok,
        status="healthy" if database_ok else "unhealthy",
        version=__version__,
        uptime_seconds=round(time.time() - _started_at, 2),
        components=[
            ComponentHealth(
                name="database", status="healthy" if database_ok else "unhealthy"
            )
        ],
    )

    if not database_ok:
        logger.warning("Health check failed", component="database")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=health.model_dump(mode="json"),
        )

    return health
