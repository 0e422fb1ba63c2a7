"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from enslookup.client import EnsLookupClient


async def get_lookup_client(request: Request) -> EnsLookupClient:
    """Get ENS lookup client from app state."""
    return request.app.state.lookup_client


# Type alias for cleaner dependency injection
LookupClient = Annotated[EnsLookupClient, Depends(get_lookup_client)]
