"""FastAPI application and routes."""

from enslookup.api.app import app, create_app

__all__ = [
    "app",
    "create_app",
]
