"""
Health check and monitoring router.

Provides liveness and readiness endpoints.
"""

from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..database import check_database, get_db, get_db_stats
from ..domain.exceptions import RepositoryException
from ..repositories.sqlalchemy_repository import SqlAlchemyPlantRepository

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])

SERVICE_NAME = "garden-service"
SERVICE_VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: str
    service: str = SERVICE_NAME
    version: str = SERVICE_VERSION


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    ready: bool
    checks: dict
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
)
async def health_check():
    """
    Basic health check.

    Always returns 200 OK if the service is running.
    """
    return HealthResponse(status="healthy", timestamp=_now())


@router.get("/ready", response_model=ReadinessResponse, summary="Readiness check")
async def readiness_check(db: Session = Depends(get_db)):
    """
    Readiness check.

    Returns 200 when the database answers and the plants table can be
    counted, 503 otherwise.
    """
    database_ok = check_database(db)
    checks = {
        "database": "healthy" if database_ok else "unavailable",
        "pool": get_db_stats(),
    }

    ready = database_ok
    if database_ok:
        try:
            checks["plants"] = await SqlAlchemyPlantRepository(db).count()
        except RepositoryException as e:
            checks["plants"] = "unavailable"
            ready = False
            logger.warning("Plant count failed", error=e.message)

    body = ReadinessResponse(ready=ready, checks=checks, timestamp=_now())

    if not ready:
        logger.warning("Service not ready", checks=checks)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=body.model_dump(),
        )
    return body
