"""
Health check endpoints.

Provides basic and detailed health check functionality.
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from api.schemas.common import (
    HealthStatus,
    HealthCheckResponse,
    DetailedHealthCheckResponse,
    ComponentHealth,
)
from core.config import get_settings, Settings
from database import is_database_available
from services.storage import get_storage_manager

router = APIRouter(prefix="/health", tags=["health"])

# Track application start time for uptime calculation
_start_time = time.time()


def _database_health(settings: Settings) -> ComponentHealth:
    if not settings.is_database_configured:
        return ComponentHealth(status=HealthStatus.DEGRADED, error="Database not configured")
    if not is_database_available():
        return ComponentHealth(status=HealthStatus.UNHEALTHY, error="Database not initialized")
    return ComponentHealth(status=HealthStatus.HEALTHY)


@router.get(
    "",
    response_model=HealthCheckResponse,
    summary="Basic health check",
    description="Quick health check endpoint for load balancers and container orchestration.",
)
async def health_check() -> HealthCheckResponse:
    """
    Basic health check.

    Returns a simple healthy status if the API is running.
    """
    return HealthCheckResponse(
        status=HealthStatus.HEALTHY,
        timestamp=datetime.now(timezone.utc),
    )


@router.get(
    "/detailed",
    response_model=DetailedHealthCheckResponse,
    summary="Detailed health check",
    description="Comprehensive health check with status of all components.",
)
async def detailed_health_check(
    settings: Settings = Depends(get_settings),
) -> DetailedHealthCheckResponse:
    """
    Detailed health check with component status.

    Checks the health of:
    - Database connection
    - Image storage backend
    - Gemini API (if API key configured)
    """
    components = {}

    components["database"] = _database_health(settings)

    storage = get_storage_manager()
    if storage.is_available:
        components["storage"] = ComponentHealth(
            status=HealthStatus.HEALTHY,
            details={"backend": storage.provider.name, "bucket": settings.storage_bucket},
        )
    else:
        components["storage"] = ComponentHealth(
            status=HealthStatus.UNHEALTHY,
            error=f"Storage backend '{storage.provider.name}' unavailable",
        )

    if settings.is_gemini_configured:
        components["gemini_api"] = ComponentHealth(
            status=HealthStatus.HEALTHY,
            details={"model": settings.gemini_model},
        )
    else:
        components["gemini_api"] = ComponentHealth(
            status=HealthStatus.DEGRADED,
            error="GEMINI_API_KEY not configured, prompts are stored untranslated",
        )

    statuses = {c.status for c in components.values()}
    if HealthStatus.UNHEALTHY in statuses:
        overall_status = HealthStatus.UNHEALTHY
    elif HealthStatus.DEGRADED in statuses:
        overall_status = HealthStatus.DEGRADED
    else:
        overall_status = HealthStatus.HEALTHY

    # Calculate uptime
    uptime_seconds = time.time() - _start_time

    return DetailedHealthCheckResponse(
        status=overall_status,
        timestamp=datetime.now(timezone.utc),
        version=settings.app_version,
        environment=settings.environment,
        uptime_seconds=round(uptime_seconds, 2),
        components=components,
    )


@router.get(
    "/ready",
    response_model=HealthCheckResponse,
    summary="Readiness check",
    description="Check if the application is ready to accept traffic.",
)
async def readiness_check(
    settings: Settings = Depends(get_settings),
) -> HealthCheckResponse:
    """
    Readiness check for Kubernetes.

    Unhealthy only when a configured database failed to initialize.
    """
    database = _database_health(settings)

    return HealthCheckResponse(
        status=HealthStatus.UNHEALTHY if database.status == HealthStatus.UNHEALTHY else HealthStatus.HEALTHY,
        timestamp=datetime.now(timezone.utc),
    )


@router.get(
    "/live",
    response_model=HealthCheckResponse,
    summary="Liveness check",
    description="Check if the application is alive.",
)
async def liveness_check() -> HealthCheckResponse:
    """
    Liveness check for Kubernetes.

    Simple check that the application process is running.
    """
    return HealthCheckResponse(
        status=HealthStatus.HEALTHY,
        timestamp=datetime.now(timezone.utc),
    )
