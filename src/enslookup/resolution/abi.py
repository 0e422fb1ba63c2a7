"""ABI encoding for the ENS registry and resolver read calls."""

from __future__ import annotations

from enslookup.core.namehash import keccak256

# Mainnet ENS registry (with fallback)
ENS_REGISTRY_ADDRESS = "0x00000000000C2E074eC69A0dFb2997BA6C7d2e1e"

RESOLVER_SIGNATURE = "resolver(bytes32)"
ADDR_SIGNATURE = "addr(bytes32)"

WORD_SIZE = 32


def function_selector(signature: str) -> bytes:
    """First four bytes of the keccak hash of a canonical function signature."""
    return keccak256(signature.encode("ascii"))[:4]


RESOLVER_SELECTOR = function_selector(RESOLVER_SIGNATURE)
ADDR_SELECTOR = function_selector(ADDR_SIGNATURE)


def encode_node_call(selector: bytes, node: bytes) -> str:
    """
    Encode calldata for a ``f(bytes32 node)`` call.

    Returns:
        0x-prefixed hex calldata (4-byte selector followed by the node)
    """
    if len(node) != WORD_SIZE:
        raise ValueError(f"Node must be {WORD_SIZE} bytes, got {len(node)}")
    return "0x" + (selector + node).hex()


def decode_address(data: bytes) -> str:
    """
    Decode a single ABI-encoded ``address`` return value.

    Raises:
        ValueError: If the data is shorter than one word
    """
    if len(data) < WORD_SIZE:
        raise ValueError(f"Expected at least {WORD_SIZE} bytes, got {len(data)}")
    return "0x" + data[12:WORD_SIZE].hex()
