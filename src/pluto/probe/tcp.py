from __future__ import annotations

from typing import TYPE_CHECKING

from pluto.metrics import Frame, calculate_delay
from pluto.probe.base import payload, recording
from pluto.probe.connector import connect

if TYPE_CHECKING:
    from pluto.session import Session


async def tcp_ping(session: Session) -> Frame:
    """Connect, push ``payload_size`` fill bytes and time until the write is drained."""
    config = session.config
    frame = session.push_frame()
    with recording(frame):
        conn = await connect(config.host, config.port, config.timeout_sec)
        async with conn:
            frame.peer = conn.peer
            await conn.write(payload(config.payload_size))
            frame.send_success = True
            calculate_delay(frame)
            frame.success = True
    return frame
