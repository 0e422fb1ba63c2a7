"""Resolution layer for reading ENS records from RPC providers."""

from enslookup.resolution.abi import (
    ADDR_SELECTOR,
    ENS_REGISTRY_ADDRESS,
    RESOLVER_SELECTOR,
    decode_address,
    encode_node_call,
    function_selector,
)
from enslookup.resolution.chain import ChainResult, ProviderChain
from enslookup.resolution.query import AttemptResult, RegistryQueryClient
from enslookup.resolution.registry import ProviderRegistry
from enslookup.resolution.rpc import RpcClient

__all__ = [
    # ABI
    "ADDR_SELECTOR",
    "ENS_REGISTRY_ADDRESS",
    "RESOLVER_SELECTOR",
    "decode_address",
    "encode_node_call",
    "function_selector",
    # Transport
    "RpcClient",
    # Query
    "AttemptResult",
    "RegistryQueryClient",
    # Chain
    "ChainResult",
    "ProviderChain",
    # Registry
    "ProviderRegistry",
]
