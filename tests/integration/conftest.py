"""Integration test fixtures for the HTTP API."""

from __future__ import annotations

from typing import AsyncIterator

import pytest
import respx
from httpx import ASGITransport, AsyncClient

from enslookup.client import EnsLookupClient
from enslookup.config import EnsLookupSettings

# ============================================================================
# FastAPI Test Client Fixtures
# ============================================================================


@pytest.fixture
def test_app(settings: EnsLookupSettings):
    """Create test FastAPI application with the lookup client in app state."""
    from fastapi import FastAPI

    from enslookup.api.errors import register_exception_handlers
    from enslookup.api.routes import health_router, resolve_router

    # Create a minimal app for testing
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(resolve_router, prefix="/api/v1")

    app.state.settings = settings
    app.state.lookup_client = EnsLookupClient(settings)

    return app


@pytest.fixture
async def test_client(test_app) -> AsyncIterator[AsyncClient]:
    """Create async HTTP test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def rpc_mock():
    """Mock outbound RPC traffic; the ASGI test client is not intercepted."""
    with respx.mock(assert_all_called=False) as router:
        yield router
