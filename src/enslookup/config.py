"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from enslookup.resolution.abi import ENS_REGISTRY_ADDRESS


class EnsLookupSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="ENSLOOKUP_",
    )

    # RPC providers, tried in order
    rpc_endpoints: list[str] = Field(
        default=[
            "https://ethereum.publicnode.com",
            "https://1rpc.io/eth",
            "https://eth.drpc.org",
        ],
        description="Default JSON-RPC endpoints in priority order",
    )
    rpc_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Timeout in seconds for each RPC read",
    )
    rpc_retry_count: int = Field(
        default=1,
        ge=0,
        description="Retries per RPC read on transport failure",
    )
    rpc_retry_delay: float = Field(
        default=0.15,
        ge=0,
        description="Base delay in seconds for exponential retry backoff",
    )

    # ENS
    registry_address: str = Field(
        default=ENS_REGISTRY_ADDRESS,
        pattern=r"^0x[0-9a-fA-F]{40}$",
        description="ENS registry contract address",
    )

    # API
    cors_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins",
    )

    # App settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


@lru_cache
def get_settings() -> EnsLookupSettings:
    """Get cached settings instance."""
    return EnsLookupSettings()
