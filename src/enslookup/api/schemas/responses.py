"""Response schemas for API endpoints."""

from __future__ import annotations

from typing import Literal

from enslookup.api.schemas.base import APIBaseSchema


class ResolveEnsResponse(APIBaseSchema):
    """Resolved ENS name."""

    name: str
    normalized_name: str
    node: str
    address: str
    provider: str


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    services: dict[str, Literal["up", "down", "unknown"]]
