"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /api/health always returns 200 if process is up (liveness)
    - GET /api/health/ready returns 503 if database is unreachable (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
    - db_manager read through the module at call time: it is assigned during lifespan
"""

from fastapi import APIRouter, status

import app.infrastructure.database as database
from app.api.responses import handle_failed, handle_success
from app.core.domain_types import ResponseStatus

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("")
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return handle_success(
        status.HTTP_200_OK, {"service": "coachhub-admin-api", "version": "1.0.0"},
    )


@router.get("/ready")
async def readiness_check():
    """Readiness probe — includes database connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return handle_failed(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            "database_unavailable",
            ResponseStatus.ERROR,
        )
    return handle_success(status.HTTP_200_OK, {"database": "healthy"})
