"""Request schemas for API endpoints."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from enslookup.api.schemas.base import APIBaseSchema


class ResolveEnsRequest(APIBaseSchema):
    """Request to resolve an ENS name to an address."""

    ens_name: Annotated[
        str | None,
        Field(
            default=None,
            max_length=1000,
            description="ENS name to resolve, e.g. vitalik.eth",
        ),
    ]

    rpc_url: Annotated[
        str | None,
        Field(
            default=None,
            description="Custom RPC endpoint. When set, the default providers are not used.",
        ),
    ]
