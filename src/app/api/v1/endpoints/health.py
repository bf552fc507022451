"""Health check endpoints.

Provides liveness and readiness probes for Kubernetes and load balancers.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from app.core.config import Settings, get_settings
from app.database import check_redis_health
from app.schemas.enums import HealthStatus
from app.schemas.health import HealthResponse, ReadinessResponse


router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Basic health check to verify the service is running.",
)
async def health_check(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Check if the service is alive. Dependencies are not checked."""
    return HealthResponse(
        status=HealthStatus.HEALTHY,
        version=settings.app.version,
        environment=settings.APP_ENV,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness probe",
    description="Readiness check verifying the document store is reachable.",
    responses={503: {"model": ReadinessResponse}},
)
async def readiness_check(
    response: Response,
    settings: Annotated[Settings, Depends(get_settings)],
) -> ReadinessResponse:
    """Check if the service can handle requests.

    Returns 503 while Redis is unreachable so the instance receives no
    traffic.
    """
    dependencies = await check_redis_health()
    healthy = all(value == HealthStatus.HEALTHY for value in dependencies.values())
    if not healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return ReadinessResponse(
        status=HealthStatus.HEALTHY if healthy else HealthStatus.UNHEALTHY,
        version=settings.app.version,
        environment=settings.APP_ENV,
        dependencies=dependencies,
    )
