"""enslookup - ENS name resolution with RPC provider fallback."""

__version__ = "0.1.0"

from enslookup.client import EnsLookupClient, resolve_name  # noqa: E402
from enslookup.config import EnsLookupSettings  # noqa: E402
from enslookup.core.exceptions import (  # noqa: E402
    AllProvidersExhaustedError,
    EnsLookupError,
    InvalidNameError,
    NameNotFoundError,
    NoAddressSetError,
    NoProvidersConfiguredError,
    ProviderUnavailableError,
)
from enslookup.core.models import Provider, ResolvedName  # noqa: E402
from enslookup.core.namehash import namehash  # noqa: E402
from enslookup.core.normalization import normalize_name  # noqa: E402
from enslookup.resolution.chain import ChainResult, ProviderChain  # noqa: E402

__all__ = [
    # Client
    "EnsLookupClient",
    "EnsLookupSettings",
    "resolve_name",
    # Pipeline
    "ChainResult",
    "ProviderChain",
    "namehash",
    "normalize_name",
    # Models
    "Provider",
    "ResolvedName",
    # Errors
    "AllProvidersExhaustedError",
    "EnsLookupError",
    "InvalidNameError",
    "NameNotFoundError",
    "NoAddressSetError",
    "NoProvidersConfiguredError",
    "ProviderUnavailableError",
    # Version
    "__version__",
]
