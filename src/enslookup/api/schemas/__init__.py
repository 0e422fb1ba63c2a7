"""API schema definitions."""

from enslookup.api.schemas.base import APIBaseSchema, APIError, ErrorDetail
from enslookup.api.schemas.requests import ResolveEnsRequest
from enslookup.api.schemas.responses import HealthResponse, ResolveEnsResponse

__all__ = [
    # Base
    "APIBaseSchema",
    "APIError",
    "ErrorDetail",
    # Requests
    "ResolveEnsRequest",
    # Responses
    "HealthResponse",
    "ResolveEnsResponse",
]
