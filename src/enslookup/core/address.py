"""Ethereum address helpers."""

from __future__ import annotations

import re

from .namehash import keccak256

ZERO_ADDRESS = "0x" + "0" * 40

ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")


def is_address(value: str) -> bool:
    """Check for a 0x-prefixed 20-byte hex string (any casing)."""
    return bool(ADDRESS_PATTERN.match(value))


def is_zero_address(value: str | None) -> bool:
    """Whether the value is missing or the all-zero sentinel."""
    if not value:
        return True
    return value.lower() == ZERO_ADDRESS


def to_checksum_address(value: str) -> str:
    """
    Apply EIP-55 mixed-case checksum encoding.

    Raises:
        ValueError: If value is not a 20-byte hex address
    """
    if not is_address(value):
        raise ValueError(f"Invalid address: {value}")

    lower = value[2:].lower()
    digest = keccak256(lower.encode("ascii")).hex()

    return "0x" + "".join(
        c.upper() if int(digest[i], 16) >= 8 else c
        for i, c in enumerate(lower)
    )
