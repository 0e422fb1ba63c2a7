"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

import asyncio
from typing import AsyncIterator

import pytest
import respx

# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Unmatched requests raise, so any unexpected network call fails the test.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ============================================================================
# Slow Server Fixtures
# ============================================================================


@pytest.fixture
async def trickle_server() -> AsyncIterator[str]:
    """
    Local HTTP server that sends its headers promptly, then drips the body.

    One byte every 0.25s of a 100-byte body, so no single socket read ever
    waits long. Yields the server URL.
    """
    handlers: set[asyncio.Task] = set()

    async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        handlers.add(asyncio.current_task())
        try:
            await reader.readuntil(b"\r\n\r\n")
            writer.write(
                b"HTTP/1.1 200 OK\r\n"
                b"Content-Type: application/json\r\n"
                b"Content-Length: 100\r\n"
                b"\r\n"
            )
            await writer.drain()
            for _ in range(100):
                await asyncio.sleep(0.25)
                writer.write(b" ")
                await writer.drain()
        except (ConnectionError, asyncio.IncompleteReadError):
            pass
        finally:
            writer.close()

    server = await asyncio.start_server(handle, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]

    yield f"http://127.0.0.1:{port}"

    for task in handlers:
        task.cancel()
    await asyncio.gather(*handlers, return_exceptions=True)
    server.close()
    await server.wait_closed()
