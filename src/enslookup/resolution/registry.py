"""Provider registry for selecting which RPC endpoints to query."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from enslookup.core.models import Provider

if TYPE_CHECKING:
    from enslookup.config import EnsLookupSettings


class ProviderRegistry:
    """
    Holds the default provider list and applies caller overrides.

    An override replaces the defaults entirely; it is never merged with
    or reordered against them.
    """

    def __init__(
        self,
        defaults: Sequence[Provider] = (),
        *,
        timeout: float = 10.0,
        retry_count: int = 1,
        retry_delay: float = 0.15,
    ) -> None:
        self._defaults = tuple(defaults)
        self._timeout = timeout
        self._retry_count = retry_count
        self._retry_delay = retry_delay

    @property
    def defaults(self) -> tuple[Provider, ...]:
        """Built-in providers in priority order."""
        return self._defaults

    def providers_for(self, override: str | None = None) -> list[Provider]:
        """Return the providers to try for a request."""
        if override:
            return [
                Provider(
                    url=override,
                    timeout=self._timeout,
                    retry_count=self._retry_count,
                    retry_delay=self._retry_delay,
                )
            ]
        return list(self._defaults)

    @classmethod
    def from_settings(cls, settings: "EnsLookupSettings") -> "ProviderRegistry":
        """Create a registry with default providers from settings."""
        defaults = [
            Provider(
                url=url,
                timeout=settings.rpc_timeout,
                retry_count=settings.rpc_retry_count,
                retry_delay=settings.rpc_retry_delay,
            )
            for url in settings.rpc_endpoints
        ]
        return cls(
            defaults,
            timeout=settings.rpc_timeout,
            retry_count=settings.rpc_retry_count,
            retry_delay=settings.rpc_retry_delay,
        )
