"""Provider chain for fallback resolution."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

from enslookup.core.exceptions import (
    AllProvidersExhaustedError,
    NoProvidersConfiguredError,
    ProviderUnavailableError,
    ResolutionError,
)
from enslookup.core.models import Provider
from enslookup.core.types import AttemptStatus
from enslookup.resolution.query import AttemptResult, RegistryQueryClient

logger = logging.getLogger(__name__)


@dataclass
class ChainResult:
    """Per-provider attempts from one fallback run, in the order tried."""

    attempts: list[AttemptResult] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Whether any provider answered."""
        return any(a.success for a in self.attempts)

    @property
    def successful_attempt(self) -> AttemptResult | None:
        """The attempt that answered, if any."""
        for attempt in self.attempts:
            if attempt.success:
                return attempt
        return None

    @property
    def address(self) -> str | None:
        """Address from the first successful attempt."""
        attempt = self.successful_attempt
        return attempt.address if attempt else None

    @property
    def errors(self) -> list[ResolutionError]:
        return [a.error for a in self.attempts if a.error is not None]

    @property
    def last_error(self) -> ResolutionError | None:
        errors = self.errors
        return errors[-1] if errors else None

    @property
    def providers_tried(self) -> list[str]:
        return [a.provider.url for a in self.attempts]

    def raise_for_failure(self) -> None:
        """Raise AllProvidersExhaustedError if no provider answered."""
        if not self.success and self.last_error is not None:
            raise AllProvidersExhaustedError(self.last_error, self.errors)


class ProviderChain:
    """
    Drives resolution attempts across an ordered list of providers.

    Providers are tried strictly in the order given, one at a time. The
    first success is returned as-is; failures of any kind (unavailable,
    not found, no address) are logged and the next provider is tried.
    """

    def __init__(self, query_client: RegistryQueryClient | None = None) -> None:
        self.query_client = query_client or RegistryQueryClient()

    async def run(self, node: bytes, providers: Sequence[Provider]) -> ChainResult:
        """Try providers in order, stopping on first success."""
        if not providers:
            raise NoProvidersConfiguredError("No RPC providers configured")

        result = ChainResult()

        for provider in providers:
            attempt = await self._try_provider(provider, node)
            result.attempts.append(attempt)

            if attempt.success:
                logger.info(
                    f"Resolved via {provider.url} in {attempt.duration_ms:.0f}ms "
                    f"after {len(result.attempts)} attempt(s)"
                )
                break

            logger.warning(
                f"RPC {provider.url} failed at {attempt.stage or 'unknown stage'} "
                f"({attempt.status}): "
                f"{attempt.error.message if attempt.error else 'unknown error'}"
            )
        else:
            logger.warning(f"All {len(result.attempts)} RPC provider(s) failed")

        return result

    async def resolve(self, node: bytes, providers: Sequence[Provider]) -> str:
        """
        Resolve a node to an address using fallback across providers.

        Raises:
            NoProvidersConfiguredError: If providers is empty
            AllProvidersExhaustedError: If every provider failed
        """
        result = await self.run(node, providers)
        result.raise_for_failure()
        return result.address

    async def _try_provider(self, provider: Provider, node: bytes) -> AttemptResult:
        """Try a single provider with error handling."""
        start = time.monotonic()
        try:
            return await self.query_client.attempt(provider, node)
        except Exception as e:
            logger.exception(f"Provider {provider.url} raised unexpectedly: {e}")
            return AttemptResult(
                provider=provider,
                status=AttemptStatus.UNAVAILABLE,
                stage=None,
                error=ProviderUnavailableError(
                    message=f"RPC {provider.url} failed: {e}",
                    provider=provider.url,
                ),
                duration_ms=(time.monotonic() - start) * 1000,
            )
