"""Shared test fixtures for all tests."""

from __future__ import annotations

import json

import pytest
from httpx import Request, Response

from enslookup.config import EnsLookupSettings
from enslookup.core.address import ZERO_ADDRESS
from enslookup.core.models import Provider
from enslookup.resolution.abi import ADDR_SELECTOR, RESOLVER_SELECTOR

PROVIDER_URLS = [
    "https://rpc-one.example",
    "https://rpc-two.example",
    "https://rpc-three.example",
]


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def vitalik_address() -> str:
    """Checksummed address that vitalik.eth resolves to."""
    return "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045"


@pytest.fixture
def resolver_address() -> str:
    """Checksummed address of a public resolver contract."""
    return "0x231b0Ee14048e9dCcD1d247744d114a4EB5E8E63"


# ============================================================================
# Provider Fixtures
# ============================================================================


@pytest.fixture
def make_provider():
    """Factory for providers with no retry delay, so tests never sleep."""
    def _make(url: str, **kwargs) -> Provider:
        kwargs.setdefault("timeout", 5.0)
        kwargs.setdefault("retry_count", 1)
        kwargs.setdefault("retry_delay", 0.0)
        return Provider(url=url, **kwargs)
    return _make


@pytest.fixture
def providers(make_provider) -> list[Provider]:
    """Three distinct providers in priority order."""
    return [make_provider(url) for url in PROVIDER_URLS]


@pytest.fixture
def provider(providers: list[Provider]) -> Provider:
    """A single provider."""
    return providers[0]


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def settings() -> EnsLookupSettings:
    """Settings pointing at the test providers."""
    return EnsLookupSettings(
        _env_file=None,
        rpc_endpoints=PROVIDER_URLS,
        rpc_timeout=5.0,
        rpc_retry_count=1,
        rpc_retry_delay=0.0,
    )


# ============================================================================
# JSON-RPC Helpers
# ============================================================================


def address_word(address: str) -> str:
    """ABI-encode an address as a 0x-prefixed 32-byte word."""
    return "0x" + "0" * 24 + address[2:].lower()


def rpc_result(result: str, request_id: int = 1) -> Response:
    """Create a JSON-RPC success response."""
    return Response(200, json={"jsonrpc": "2.0", "id": request_id, "result": result})


class RegistryStub:
    """
    Fake RPC node answering ``resolver(bytes32)`` and ``addr(bytes32)`` calls.

    Records the contract method and target of each call, in order.
    """

    def __init__(self, resolver: str = ZERO_ADDRESS, address: str = ZERO_ADDRESS) -> None:
        self.resolver = resolver
        self.address = address
        self.calls: list[str] = []
        self.targets: list[str] = []

    def __call__(self, request: Request) -> Response:
        payload = json.loads(request.content)
        call = payload["params"][0]
        selector = call["data"][:10]

        if selector == "0x" + RESOLVER_SELECTOR.hex():
            self.calls.append("resolver")
            value = self.resolver
        elif selector == "0x" + ADDR_SELECTOR.hex():
            self.calls.append("addr")
            value = self.address
        else:
            return Response(
                200,
                json={
                    "jsonrpc": "2.0",
                    "id": payload["id"],
                    "error": {"code": -32000, "message": "execution reverted"},
                },
            )

        self.targets.append(call["to"])
        return rpc_result(address_word(value), payload["id"])


@pytest.fixture
def registry_stub():
    """Factory fixture for RegistryStub instances."""
    return RegistryStub


@pytest.fixture
def rpc_responses():
    """Provide helper functions for creating JSON-RPC responses."""
    return {
        "word": address_word,
        "result": rpc_result,
    }
