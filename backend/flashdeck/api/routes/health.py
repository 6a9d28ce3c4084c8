"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /api/health/ always returns 200 if the process is up
    - No upstream call: there is no process-wide database connection to probe
"""

from fastapi import APIRouter, status

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "flashdeck-api",
        "version": "1.0.0",
    }
