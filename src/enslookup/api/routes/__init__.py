"""API route modules."""

from enslookup.api.routes.health import router as health_router
from enslookup.api.routes.resolve import router as resolve_router

__all__ = [
    "health_router",
    "resolve_router",
]
