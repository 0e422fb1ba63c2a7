"""Registry query client: one resolution attempt against one provider."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from enslookup.core.address import is_zero_address, to_checksum_address
from enslookup.core.exceptions import (
    NameNotFoundError,
    NoAddressSetError,
    ProviderUnavailableError,
    ResolutionError,
)
from enslookup.core.models import Provider
from enslookup.core.types import AttemptStatus, QueryStage
from enslookup.resolution.abi import (
    ADDR_SELECTOR,
    ENS_REGISTRY_ADDRESS,
    RESOLVER_SELECTOR,
    decode_address,
    encode_node_call,
)
from enslookup.resolution.rpc import RpcClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttemptResult:
    """Tagged outcome of one attempt against one provider."""

    provider: Provider
    status: AttemptStatus
    stage: QueryStage | None
    address: str | None = None
    error: ResolutionError | None = None
    duration_ms: float = 0.0

    @property
    def success(self) -> bool:
        return self.status == AttemptStatus.SUCCESS and self.address is not None


class RegistryQueryClient:
    """
    Performs the two dependent reads that make up a resolution attempt.

    1. ``resolver(node)`` on the ENS registry
    2. ``addr(node)`` on the resolver returned by step 1

    A zero address at step 1 means the name has no resolver; a zero address
    at step 2 means the name exists but has no address record.
    """

    def __init__(self, registry_address: str = ENS_REGISTRY_ADDRESS) -> None:
        self.registry_address = registry_address

    async def attempt(self, provider: Provider, node: bytes) -> AttemptResult:
        """Run one attempt, returning a tagged result instead of raising."""
        start = time.monotonic()
        stage = QueryStage.RESOLVER

        try:
            async with RpcClient(provider) as rpc:
                resolver = await self._read_address(rpc, self.registry_address, RESOLVER_SELECTOR, node)
                if is_zero_address(resolver):
                    return self._failure(
                        provider,
                        AttemptStatus.NAME_NOT_FOUND,
                        stage,
                        NameNotFoundError(
                            "ENS name not found or has no resolver set",
                            provider=provider.url,
                        ),
                        start,
                    )

                logger.debug(f"Resolver via {provider.url}: {resolver}")
                stage = QueryStage.ADDR
                address = await self._read_address(rpc, resolver, ADDR_SELECTOR, node)
                if is_zero_address(address):
                    return self._failure(
                        provider,
                        AttemptStatus.NO_ADDRESS,
                        stage,
                        NoAddressSetError(
                            "ENS name is registered but has no address set",
                            provider=provider.url,
                            details={"resolver": to_checksum_address(resolver)},
                        ),
                        start,
                    )

        except ProviderUnavailableError as e:
            return self._failure(provider, AttemptStatus.UNAVAILABLE, stage, e, start)
        except Exception as e:
            logger.exception(f"RPC {provider.url} raised unexpectedly at {stage}: {e}")
            error = ProviderUnavailableError(
                message=f"RPC {provider.url} failed: {e}",
                provider=provider.url,
            )
            return self._failure(provider, AttemptStatus.UNAVAILABLE, stage, error, start)

        return AttemptResult(
            provider=provider,
            status=AttemptStatus.SUCCESS,
            stage=stage,
            address=to_checksum_address(address),
            duration_ms=(time.monotonic() - start) * 1000,
        )

    async def lookup(self, provider: Provider, node: bytes) -> str:
        """
        Resolve a node against a single provider.

        Returns:
            Checksummed address

        Raises:
            NameNotFoundError: Registry has no resolver for the node
            NoAddressSetError: Resolver has no address record
            ProviderUnavailableError: Transport or response failure
        """
        result = await self.attempt(provider, node)
        if result.error is not None:
            raise result.error
        return result.address

    async def _read_address(
        self,
        rpc: RpcClient,
        contract: str,
        selector: bytes,
        node: bytes,
    ) -> str:
        """Call ``f(bytes32)`` on a contract and decode its address result."""
        raw = await rpc.eth_call(contract, encode_node_call(selector, node))
        try:
            return decode_address(raw)
        except ValueError as e:
            raise ProviderUnavailableError(
                message=f"Malformed response from {rpc.provider.url}: {e}",
                provider=rpc.provider.url,
            ) from e

    @staticmethod
    def _failure(
        provider: Provider,
        status: AttemptStatus,
        stage: QueryStage,
        error: ResolutionError,
        start: float,
    ) -> AttemptResult:
        return AttemptResult(
            provider=provider,
            status=status,
            stage=stage,
            error=error,
            duration_ms=(time.monotonic() - start) * 1000,
        )
