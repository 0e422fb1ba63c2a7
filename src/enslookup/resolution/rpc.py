"""JSON-RPC transport with per-read timeout and retry handling."""

from __future__ import annotations

import asyncio
import itertools
import logging
from typing import Any

import httpx

from enslookup.core.exceptions import ProviderUnavailableError
from enslookup.core.models import Provider

logger = logging.getLogger(__name__)


class RpcClient:
    """
    Minimal JSON-RPC client bound to a single provider.

    The underlying HTTP client lives only as long as the ``async with``
    block, so one instance serves exactly one resolution attempt.

    Usage:
        async with RpcClient(provider) as rpc:
            data = await rpc.eth_call(to, calldata)
    """

    def __init__(self, provider: Provider) -> None:
        self.provider = provider
        self._client: httpx.AsyncClient | None = None
        self._ids = itertools.count(1)

    async def __aenter__(self) -> RpcClient:
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.provider.timeout),
            headers=self._get_default_headers(),
            follow_redirects=True,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    def _get_default_headers(self) -> dict[str, str]:
        return {
            "User-Agent": "enslookup/0.1",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    async def eth_call(self, to: str, data: str, block: str = "latest") -> bytes:
        """
        Execute a read-only contract call.

        Args:
            to: Contract address
            data: 0x-prefixed calldata
            block: Block tag to read at

        Returns:
            Raw return data

        Raises:
            ProviderUnavailableError: On transport failure or malformed response
        """
        result = await self.request("eth_call", [{"to": to, "data": data}, block])

        if not isinstance(result, str) or not result.startswith("0x"):
            raise self._malformed(f"expected hex string result, got {result!r}")
        try:
            return bytes.fromhex(result[2:])
        except ValueError as e:
            raise self._malformed(f"result is not valid hex: {e}") from e

    async def request(self, method: str, params: list[Any]) -> Any:
        """Send a JSON-RPC request and return its ``result`` member."""
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }
        response = await self._post(payload)

        try:
            body = response.json()
        except ValueError as e:
            raise self._malformed("response body is not JSON") from e

        if not isinstance(body, dict):
            raise self._malformed("response body is not a JSON object")

        if (error := body.get("error")) is not None:
            message = error.get("message", "unknown error") if isinstance(error, dict) else str(error)
            raise ProviderUnavailableError(
                message=f"RPC error from {self.provider.url}: {message}",
                provider=self.provider.url,
                details={"rpc_error": error},
            )

        if "result" not in body:
            raise self._malformed("response has neither result nor error")

        return body["result"]

    async def _post(self, payload: dict[str, Any]) -> httpx.Response:
        """POST with retries on transport-level failures."""
        if self._client is None:
            raise RuntimeError("RpcClient not open. Use 'async with RpcClient(provider) as rpc:'")

        retries = 0
        while True:
            try:
                # httpx timeouts apply per chunk; this bounds the whole read
                async with asyncio.timeout(self.provider.timeout):
                    response = await self._client.post(self.provider.url, json=payload)
                response.raise_for_status()
                return response
            except (httpx.HTTPError, TimeoutError) as e:
                if retries >= self.provider.retry_count:
                    status_code = (
                        e.response.status_code if isinstance(e, httpx.HTTPStatusError) else None
                    )
                    raise ProviderUnavailableError(
                        message=f"RPC {self.provider.url} unavailable: {e!r}",
                        provider=self.provider.url,
                        status_code=status_code,
                    ) from e

                wait_time = self.provider.retry_delay * 2**retries
                retries += 1
                logger.debug(
                    f"RPC {self.provider.url} request failed ({e!r}), "
                    f"retry {retries}/{self.provider.retry_count} in {wait_time:.2f}s"
                )
                await asyncio.sleep(wait_time)

    def _malformed(self, reason: str) -> ProviderUnavailableError:
        return ProviderUnavailableError(
            message=f"Malformed response from {self.provider.url}: {reason}",
            provider=self.provider.url,
        )
