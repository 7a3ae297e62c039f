"""Health & Readiness Probes: liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the database is unconfigured or unreachable

Design Decisions:
    - Separate liveness/readiness: the API degrades without a database, so
      liveness must not depend on it
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from daily_puzzle.api.dependencies import get_store
from daily_puzzle.services.puzzle_store import PuzzleStore

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "daily-puzzle-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(store: PuzzleStore = Depends(get_store)):
    """Readiness probe: includes database connectivity."""
    db_ok = await store.health_check()
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
