"""Health & Readiness Probes — liveness and database readiness, outside the auth gate.

Invariants:
    - GET /health/ answers 200 while the process is up
    - GET /health/ready answers 503 {"status": "error", "message": ...} until the
      session manager exists and a query round-trips
    - db_manager read at request time: the lifespan (or a test) may replace it
"""

import logging
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from tubehub.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

DATABASE_UNAVAILABLE = "Database unavailable"


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(request: Request):
    return {
        "status": "healthy",
        "service": "tubehub-api",
        "version": request.app.version,
    }


@router.get("/ready")
async def readiness_check(request: Request):
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        logger.warning("Readiness probe failed", extra={"path": request.url.path})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "error", "message": DATABASE_UNAVAILABLE},
        )
    return {
        "status": "ready",
        "checks": {
            "database": "healthy",
            "dialect": manager.engine.dialect.name,
        },
    }
