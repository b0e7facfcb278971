"""Health endpoints."""

import time
from datetime import UTC, datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from video_grid import __version__
from video_grid.models import DetailedHealthResponse, HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint.

    For detailed health status, use `/health/ready`.
    """
    return HealthResponse(status="ok", version=__version__)


@router.get("/health/ready", response_model=DetailedHealthResponse)
async def readiness_check(request: Request):
    """Readiness probe - can the application serve traffic?

    **Returns:**
    - 200: Layout state is initialized
    - 503: Layout state is missing

    Also reports uptime and the number of requests served since startup.
    """
    checks = {}
    all_healthy = True

    manager = getattr(request.app.state, "layout_state_manager", None)
    checks["layout_state"] = "ok" if manager is not None else "not_initialized"
    if manager is None:
        all_healthy = False
    else:
        snapshot = await manager.get_snapshot()
        checks["container_measured"] = "ok" if snapshot.container_width and snapshot.container_height else "pending"

    startup_time = getattr(request.app.state, "startup_time", None)
    checks["uptime_seconds"] = str(int(time.time() - startup_time)) if startup_time is not None else "unknown"
    checks["requests"] = str(getattr(request.app.state, "request_count", 0))

    status_code = 200 if all_healthy else 503
    status = "healthy" if all_healthy else "unhealthy"

    return JSONResponse(
        status_code=status_code,
        content=DetailedHealthResponse(
            status=status,
            version=__version__,
            timestamp=datetime.now(UTC),
            checks=checks,
        ).model_dump(mode="json"),
    )
