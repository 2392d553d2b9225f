from __future__ import annotations

import asyncio
import contextlib
from dataclasses import dataclass

from pluto.metrics import ErrorType


class ProbeError(Exception):
    """A single attempt failed; the session records it as a loss and moves on."""

    error_type: ErrorType = ErrorType.CONNECT

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConnectTimeout(ProbeError):
    error_type = ErrorType.TIMEOUT


class ConnectFailed(ProbeError):
    error_type = ErrorType.CONNECT


class SendFailed(ProbeError):
    error_type = ErrorType.WRITE


class ReceiveFailed(ProbeError):
    error_type = ErrorType.READ


@dataclass(slots=True)
class Connection:
    reader: asyncio.StreamReader
    writer: asyncio.StreamWriter
    peer: str

    async def write(self, data: bytes) -> None:
        try:
            self.writer.write(data)
            await self.writer.drain()
        except OSError as exc:
            msg = f"write to {self.peer} failed: {exc}"
            raise SendFailed(msg, exc) from exc

    async def readline(self) -> bytes:
        try:
            return await self.reader.readline()
        except (OSError, ValueError) as exc:
            # ValueError: line longer than the stream buffer limit
            msg = f"read from {self.peer} failed: {exc}"
            raise ReceiveFailed(msg, exc) from exc

    async def close(self) -> None:
        self.writer.close()
        with contextlib.suppress(OSError):
            await self.writer.wait_closed()

    async def __aenter__(self) -> Connection:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()


def _format_peer(peername: object, host: str, port: int) -> str:
    if isinstance(peername, tuple) and len(peername) >= 2:
        addr, peer_port = peername[0], peername[1]
        if ":" in str(addr):
            return f"[{addr}]:{peer_port}"
        return f"{addr}:{peer_port}"
    return f"{host}:{port}"


async def connect(host: str, port: int, timeout: float) -> Connection:
    """Open a stream connection to ``host:port``, giving up after ``timeout`` seconds.

    Raises ConnectTimeout when the deadline passes and ConnectFailed for every
    other transport error (refused, unreachable, name resolution).
    """
    try:
        reader, writer = await asyncio.wait_for(
            asyncio.open_connection(host, port),
            timeout=timeout,
        )
    except asyncio.TimeoutError as exc:
        msg = f"connect to {host}:{port} timed out after {timeout * 1000.0:.0f}ms"
        raise ConnectTimeout(msg, exc) from exc
    except (OSError, UnicodeError) as exc:
        # UnicodeError: the idna codec rejects the host name during resolution
        msg = f"connect to {host}:{port} failed: {exc}"
        raise ConnectFailed(msg, exc) from exc
    peer = _format_peer(writer.get_extra_info("peername"), host, port)
    return Connection(reader=reader, writer=writer, peer=peer)
