from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ErrorType(str, Enum):
    TIMEOUT = "timeout"
    CONNECT = "connect"
    WRITE = "write"
    READ = "read"


class FrameOutcome(str, Enum):
    NOT_SENT = "not_sent"
    SENT_FAILED = "sent_failed"
    SENT_OK = "sent_ok"


@dataclass(slots=True)
class Frame:
    """One probe attempt.

    ``start`` is a ``time.perf_counter()`` reading taken before the attempt
    begins. ``elapsed_ms`` stays 0.0 until the attempt reaches its terminal
    condition and is written once by ``calculate_delay``.
    """

    start: float
    elapsed_ms: float = 0.0
    send_success: bool = False
    success: bool = False
    peer: str | None = None
    error: ErrorType | None = None
    _timed: bool = field(default=False, repr=False, compare=False)

    @property
    def outcome(self) -> FrameOutcome:
        if not self.send_success:
            return FrameOutcome.NOT_SENT
        if not self.success:
            return FrameOutcome.SENT_FAILED
        return FrameOutcome.SENT_OK


@dataclass(frozen=True, slots=True)
class Summary:
    total: int
    sent: int
    success: int
    loss: int
    minimum_ms: float
    maximum_ms: float
    average_ms: float
    p50_ms: float
    p95_ms: float
    p99_ms: float
    elapsed_ms: float

    @property
    def loss_pct(self) -> float:
        if self.total == 0:
            return 0.0
        return self.loss / self.total * 100.0
