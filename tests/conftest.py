from __future__ import annotations

import asyncio
import socket
from dataclasses import dataclass, field
from typing import AsyncIterator, Awaitable, Callable

import pytest
import pytest_asyncio

RESPONSE = b"HTTP/1.1 200 OK\r\nContent-type: text/plain\r\n\r\nHello world"

Handler = Callable[[asyncio.StreamReader, asyncio.StreamWriter], Awaitable[None]]


@dataclass
class LocalServer:
    host: str
    port: int
    received: asyncio.Queue[bytes] = field(default_factory=asyncio.Queue)


async def _read_request(reader: asyncio.StreamReader) -> bytes:
    head = b""
    length = 0
    while True:
        line = await reader.readline()
        head += line
        if line.lower().startswith(b"content-length:"):
            length = int(line.split(b":", 1)[1])
        if len(line) < 3:
            break
    body = await reader.readexactly(length) if length else b""
    return head + body


async def _serve(make_handler: Callable[[LocalServer], Handler]) -> AsyncIterator[LocalServer]:
    local = LocalServer(host="127.0.0.1", port=0)

    async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        try:
            await make_handler(local)(reader, writer)
        finally:
            writer.close()

    server = await asyncio.start_server(handle, local.host, 0)
    local.port = server.sockets[0].getsockname()[1]
    try:
        yield local
    finally:
        server.close()
        await server.wait_closed()


def _sink(local: LocalServer) -> Handler:
    async def handler(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        local.received.put_nowait(await reader.read())

    return handler


def _responder(local: LocalServer) -> Handler:
    async def handler(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        local.received.put_nowait(await _read_request(reader))
        writer.write(RESPONSE)
        await writer.drain()

    return handler


def _hangup(local: LocalServer) -> Handler:
    async def handler(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        local.received.put_nowait(await _read_request(reader))

    return handler


@pytest_asyncio.fixture
async def tcp_sink() -> AsyncIterator[LocalServer]:
    """Accepts connections and only reads until the client closes."""
    async for local in _serve(_sink):
        yield local


@pytest_asyncio.fixture
async def http_server() -> AsyncIterator[LocalServer]:
    """Answers each request with one blank-line-terminated header block."""
    async for local in _serve(_responder):
        yield local


@pytest_asyncio.fixture
async def hangup_server() -> AsyncIterator[LocalServer]:
    """Reads one request and closes without answering."""
    async for local in _serve(_hangup):
        yield local


@pytest.fixture
def closed_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]
