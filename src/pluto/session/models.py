from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum

from pluto.config import PingMethod, SessionConfig
from pluto.metrics import Frame, Summary, start_frame, summarize
from pluto.probe import Prober, http_ping, tcp_ping


class SessionState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


_PROBERS: dict[PingMethod, Prober] = {
    PingMethod.TCP: tcp_ping,
    PingMethod.HTTP: http_ping,
}


@dataclass(slots=True)
class Session:
    """A configured run that owns its frame history and its own start clock."""

    config: SessionConfig
    frames: list[Frame] = field(default_factory=list)
    started: float | None = None
    state: SessionState = SessionState.IDLE

    @classmethod
    def build(cls, config: SessionConfig) -> Session:
        return cls(config=config.validate())

    def start(self) -> None:
        if self.state is not SessionState.IDLE:
            msg = f"Session already {self.state.value}"
            raise RuntimeError(msg)
        self.started = time.perf_counter()
        self.state = SessionState.RUNNING

    def push_frame(self) -> Frame:
        frame = start_frame()
        self.frames.append(frame)
        return frame

    async def ping(self) -> Frame:
        prober = _PROBERS[self.config.method]
        return await prober(self)

    def summarize(self, now: float | None = None) -> Summary:
        return summarize(self.frames, started=self.started, now=now)
