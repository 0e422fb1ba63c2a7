"""Health check endpoints."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Request

from enslookup import __version__
from enslookup.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Check the health status of the API and its configuration.",
)
async def health_check(request: Request) -> HealthResponse:
    """Check API health status."""
    services: dict[str, Literal["up", "down", "unknown"]] = {}
    overall_status: Literal["healthy", "degraded", "unhealthy"] = "healthy"

    # Providers are not pinged; connections are only opened per resolution
    client = getattr(request.app.state, "lookup_client", None)
    if client is None:
        services["resolver"] = "down"
        overall_status = "unhealthy"
    else:
        services["resolver"] = "up"
        if client.registry.defaults:
            services["providers"] = "unknown"
        else:
            services["providers"] = "down"
            overall_status = "degraded"

    return HealthResponse(
        status=overall_status,
        version=__version__,
        services=services,
    )


@router.get(
    "/ready",
    operation_id="getReady",
    summary="Readiness check",
    description="Check if the API is ready to serve traffic.",
)
async def readiness_check(request: Request) -> dict[str, bool]:
    """Check if API is ready to serve traffic."""
    client = getattr(request.app.state, "lookup_client", None)
    return {"ready": client is not None}
