"""Resolution endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from enslookup.api.dependencies import LookupClient
from enslookup.api.errors import error_response
from enslookup.api.schemas import APIError, ResolveEnsRequest, ResolveEnsResponse
from enslookup.core.exceptions import EnsLookupError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resolve", tags=["resolve"])


@router.post(
    "/ens",
    response_model=ResolveEnsResponse,
    responses={400: {"model": APIError}, 500: {"model": APIError}},
    operation_id="resolveEns",
    summary="Resolve ENS name",
    description="Resolve an ENS name to an address, falling back across RPC providers.",
)
async def resolve_ens(
    request: ResolveEnsRequest,
    client: LookupClient,
) -> ResolveEnsResponse | JSONResponse:
    """Resolve an ENS name through the default providers or a custom RPC URL."""
    try:
        resolved = await client.resolve(request.ens_name or "", request.rpc_url)
    except EnsLookupError as e:
        logger.error(f"ENS resolution error: {e.message}")
        return error_response(e)

    return ResolveEnsResponse.model_validate(resolved)
