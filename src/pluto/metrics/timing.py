from __future__ import annotations

import time

from pluto.metrics.models import Frame


def start_frame() -> Frame:
    return Frame(start=time.perf_counter())


def calculate_delay(frame: Frame, now: float | None = None) -> float:
    """Fix ``frame.elapsed_ms`` from its start to ``now`` (defaults to the current clock).

    Must be called exactly once, after the attempt's terminal condition.
    """
    if frame._timed:
        msg = "Frame delay already calculated"
        raise RuntimeError(msg)
    if now is None:
        now = time.perf_counter()
    frame.elapsed_ms = (now - frame.start) * 1000.0
    frame._timed = True
    return frame.elapsed_ms
