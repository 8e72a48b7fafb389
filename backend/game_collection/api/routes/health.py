"""Health & Readiness Probes - liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 if the SQL backend's database is unreachable
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from game_collection.config import get_settings
from game_collection.core.domain_types import StorageBackend
from game_collection.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "game-collection-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe, includes database connectivity for the SQL backend."""
    if get_settings().storage_backend == StorageBackend.MEMORY:
        return {"status": "ready", "checks": {"store": "memory"}}
    db_ok = await database.db_manager.health_check() if database.db_manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
