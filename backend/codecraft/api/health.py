"""Health check endpoint."""

import time
from fastapi import APIRouter, Request

from codecraft.models.responses import HealthResponse, HealthDependency

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """System health check with dependency status.

    Validation needs no dependency, so a dead Redis only degrades the service.
    """
    dependencies = {}

    try:
        redis = request.app.state.redis
        start = time.time()
        await redis.ping()
        latency = (time.time() - start) * 1000
        dependencies["redis"] = HealthDependency(status="healthy", latency_ms=round(latency, 2))
    except Exception as e:
        dependencies["redis"] = HealthDependency(status="unhealthy", message=str(e) or type(e).__name__)

    if all(d.status == "healthy" for d in dependencies.values()):
        status = "healthy"
    else:
        status = "degraded"

    return HealthResponse(
        status=status,
        uptime_seconds=round(time.time() - _start_time, 2),
        dependencies=dependencies,
    )
