"""Main library client for standalone usage."""

from __future__ import annotations

import logging

from enslookup.config import EnsLookupSettings
from enslookup.core.models import ResolvedName
from enslookup.core.namehash import namehash
from enslookup.core.normalization import normalize_name
from enslookup.resolution.chain import ProviderChain
from enslookup.resolution.query import RegistryQueryClient
from enslookup.resolution.registry import ProviderRegistry

logger = logging.getLogger(__name__)


class EnsLookupClient:
    """
    Main client for the enslookup library.

    Normalizes a name, derives its namehash, and resolves it through the
    configured RPC providers with fallback.

    Usage:
        client = EnsLookupClient()

        # Resolve through the default providers
        result = await client.resolve("vitalik.eth")

        # Resolve through a single custom provider only
        address = await client.resolve_address("vitalik.eth", "https://rpc.example")

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(
        self,
        settings: EnsLookupSettings | None = None,
        *,
        registry: ProviderRegistry | None = None,
        chain: ProviderChain | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
            registry: Provider registry. Built from settings if not provided.
            chain: Provider chain. Built from settings if not provided.
        """
        self._settings = settings or EnsLookupSettings()
        self._registry = registry or ProviderRegistry.from_settings(self._settings)
        self._chain = chain or ProviderChain(
            RegistryQueryClient(self._settings.registry_address)
        )

    @property
    def registry(self) -> ProviderRegistry:
        return self._registry

    async def resolve(
        self,
        name: str,
        provider_override: str | None = None,
    ) -> ResolvedName:
        """
        Resolve an ENS name to an address.

        Args:
            name: ENS name, e.g. "vitalik.eth"
            provider_override: RPC URL to use instead of the default providers

        Returns:
            The resolved name with its checksummed address

        Raises:
            InvalidNameError: If the name fails normalization (no network call is made)
            NoProvidersConfiguredError: If no providers are available
            AllProvidersExhaustedError: If every provider failed
        """
        normalized = normalize_name(name)
        node = namehash(normalized)
        providers = self._registry.providers_for(provider_override)
        logger.debug(f"Resolving {normalized} via {len(providers)} provider(s)")

        result = await self._chain.run(node, providers)
        result.raise_for_failure()

        attempt = result.successful_attempt
        return ResolvedName(
            name=name,
            normalized_name=normalized,
            node="0x" + node.hex(),
            address=attempt.address,
            provider=attempt.provider.url,
        )

    async def resolve_address(
        self,
        name: str,
        provider_override: str | None = None,
    ) -> str:
        """Resolve an ENS name and return only the address."""
        resolved = await self.resolve(name, provider_override)
        return resolved.address


# Convenience function for one-off resolutions
async def resolve_name(
    name: str,
    rpc_url: str | None = None,
    *,
    settings: EnsLookupSettings | None = None,
) -> str:
    """
    Resolve an ENS name to an address (convenience function).

    For multiple resolutions, reuse an EnsLookupClient.
    """
    client = EnsLookupClient(settings)
    return await client.resolve_address(name, rpc_url)
