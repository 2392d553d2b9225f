from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pluto import __version__
from pluto.config import DEFAULT_PORT, SessionConfig
from pluto.metrics import Frame, calculate_delay
from pluto.probe.base import payload, recording
from pluto.probe.connector import Connection, connect

if TYPE_CHECKING:
    from pluto.session import Session

logger = logging.getLogger(__name__)

USER_AGENT = f"pluto/{__version__}"

# A response line shorter than this ends the read: "\r\n", "\n" or EOF.
MIN_HEADER_LINE = 3


def host_header(config: SessionConfig) -> str:
    host = config.host.encode("idna").decode("ascii")
    return host if config.port == DEFAULT_PORT else f"{host}:{config.port}"


def build_request(config: SessionConfig) -> bytes:
    host = host_header(config)
    head = (
        f"{config.http_method.value} / HTTP/1.1\r\n"
        f"Host: {host}\r\n"
        f"User-Agent: {USER_AGENT}\r\n"
        "Content-Type: text/plain\r\n"
        f"Content-Length: {config.payload_size}\r\n"
        "\r\n"
    )
    return head.encode("ascii") + payload(config.payload_size)


async def read_response_head(conn: Connection) -> int:
    """Read lines until the blank line that closes the response head.

    This is not an HTTP parser. Chunked bodies or responses without a blank
    terminator are only handled as far as this heuristic goes; an early EOF
    also counts as the end. Returns the number of lines read.
    """
    lines = 0
    while True:
        line = await conn.readline()
        lines += 1
        if len(line) < MIN_HEADER_LINE:
            return lines


async def http_ping(session: Session) -> Frame:
    config = session.config
    frame = session.push_frame()
    with recording(frame):
        conn = await connect(config.host, config.port, config.timeout_sec)
        async with conn:
            frame.peer = conn.peer
            await conn.write(build_request(config))
            frame.send_success = True
            if config.wait:
                lines = await read_response_head(conn)
                logger.debug("Read %d response lines from %s", lines, conn.peer)
            calculate_delay(frame)
            frame.success = True
    return frame
