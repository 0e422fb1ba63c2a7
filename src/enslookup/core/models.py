"""Domain models for providers and resolution results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Provider(BaseModel):
    """A JSON-RPC endpoint able to execute registry and resolver reads."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., min_length=1, description="JSON-RPC endpoint URL")
    timeout: float = Field(default=10.0, gt=0, description="Per-read timeout in seconds")
    retry_count: int = Field(default=1, ge=0, description="Retries per read after the first try")
    retry_delay: float = Field(
        default=0.15, ge=0, description="Base delay in seconds for exponential retry backoff"
    )

    def __str__(self) -> str:
        return self.url


class ResolvedName(BaseModel):
    """Successful resolution of a name to an address."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Name as supplied by the caller")
    normalized_name: str = Field(..., description="ENSIP-15 normalized name")
    node: str = Field(..., description="Namehash as 0x-prefixed hex")
    address: str = Field(..., description="EIP-55 checksummed address")
    provider: str = Field(..., description="URL of the provider that answered")
