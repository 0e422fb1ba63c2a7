"""Core types, models, and utilities."""

from .address import ZERO_ADDRESS, is_address, is_zero_address, to_checksum_address
from .exceptions import (
    AllProvidersExhaustedError,
    EnsLookupError,
    InvalidNameError,
    NameNotFoundError,
    NoAddressSetError,
    NoProvidersConfiguredError,
    ProviderUnavailableError,
    ResolutionError,
)
from .models import Provider, ResolvedName
from .namehash import EMPTY_NODE, keccak256, labelhash, namehash, namehash_hex
from .normalization import normalize_name
from .types import AttemptStatus, QueryStage

__all__ = [
    # Types
    "AttemptStatus",
    "QueryStage",
    # Models
    "Provider",
    "ResolvedName",
    # Normalization
    "normalize_name",
    # Namehash
    "EMPTY_NODE",
    "keccak256",
    "labelhash",
    "namehash",
    "namehash_hex",
    # Addresses
    "ZERO_ADDRESS",
    "is_address",
    "is_zero_address",
    "to_checksum_address",
    # Exceptions
    "AllProvidersExhaustedError",
    "EnsLookupError",
    "InvalidNameError",
    "NameNotFoundError",
    "NoAddressSetError",
    "NoProvidersConfiguredError",
    "ProviderUnavailableError",
    "ResolutionError",
]
