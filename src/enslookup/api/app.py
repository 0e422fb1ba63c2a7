"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from enslookup import __version__
from enslookup.api.errors import register_exception_handlers
from enslookup.api.routes import health_router, resolve_router
from enslookup.client import EnsLookupClient
from enslookup.config import EnsLookupSettings, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Builds the lookup client from settings. No provider connections are
    held open; each resolution opens and closes its own.
    """
    settings: EnsLookupSettings = app.state.settings

    logger.info("Initializing ENS lookup client...")
    app.state.lookup_client = EnsLookupClient(settings)
    logger.info(
        f"Application startup complete ({len(settings.rpc_endpoints)} default RPC provider(s))"
    )

    yield

    logger.info("Application shutdown complete")


def create_app(
    *,
    settings: EnsLookupSettings | None = None,
    title: str = "enslookup API",
    description: str = "ENS name resolution with RPC provider fallback",
    version: str = __version__,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings. Loaded from environment if not provided.
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs
        version: API version

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    logging.getLogger("enslookup").setLevel(settings.log_level.upper())

    app = FastAPI(
        title=title,
        description=description,
        version=version,
        debug=settings.debug,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(resolve_router, prefix="/api/v1")

    return app


# For uvicorn direct execution
app = create_app()
