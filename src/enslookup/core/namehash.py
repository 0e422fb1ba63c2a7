"""ENS namehash derivation (EIP-137)."""

from Crypto.Hash import keccak

EMPTY_NODE = b"\x00" * 32


def keccak256(data: bytes) -> bytes:
    """Keccak-256 digest (the pre-NIST variant Ethereum uses)."""
    return keccak.new(digest_bits=256, data=data).digest()


def labelhash(label: str) -> bytes:
    """Hash a single label."""
    return keccak256(label.encode("utf-8"))


def namehash(name: str) -> bytes:
    """
    Compute the 32-byte node for a normalized name.

    Labels are folded from the root (rightmost) to the leaf, starting from
    the all-zero node. The empty name maps to the all-zero node.
    """
    node = EMPTY_NODE
    if not name:
        return node

    for label in reversed(name.split(".")):
        node = keccak256(node + labelhash(label))
    return node


def namehash_hex(name: str) -> str:
    """Namehash rendered as a 0x-prefixed hex string."""
    return "0x" + namehash(name).hex()
