"""Tests for address helpers."""

from __future__ import annotations

import pytest

from enslookup.core.address import (
    ZERO_ADDRESS,
    is_address,
    is_zero_address,
    to_checksum_address,
)


class TestChecksumAddress:
    """Tests for EIP-55 checksum encoding."""

    @pytest.mark.parametrize(
        "expected",
        [
            # EIP-55 reference vectors
            "0x52908400098527886E0F7030069857D2E4169EE7",
            "0x8617E340B3D01FA5F11F306F4090FD50E238070D",
            "0xde709f2102306220921060314715629080e2fb77",
            "0x27b1fdb04752bbc536007a920d24acb045561c26",
            "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
            "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359",
            "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB",
            "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb",
        ],
    )
    def test_reference_vectors(self, expected: str):
        """Lowercase input should checksum to the reference casing."""
        assert to_checksum_address(expected.lower()) == expected

    def test_uppercase_input(self, vitalik_address: str):
        """Casing of the input should not matter."""
        upper = "0x" + vitalik_address[2:].upper()
        assert to_checksum_address(upper) == vitalik_address

    @pytest.mark.parametrize("value", ["", "0x", "0x1234", "d8da6bf26964af9d7eed9e03e53415d37aa96045", "0x" + "g" * 40])
    def test_invalid_rejected(self, value: str):
        with pytest.raises(ValueError):
            to_checksum_address(value)


class TestAddressPredicates:
    """Tests for is_address and is_zero_address."""

    def test_is_address(self, vitalik_address: str):
        assert is_address(vitalik_address) is True
        assert is_address(vitalik_address.lower()) is True
        assert is_address(vitalik_address[:-1]) is False

    @pytest.mark.parametrize("value", [ZERO_ADDRESS, "0x" + "0" * 40, None, ""])
    def test_zero_sentinel(self, value):
        assert is_zero_address(value) is True

    def test_non_zero(self, vitalik_address: str):
        assert is_zero_address(vitalik_address) is False
