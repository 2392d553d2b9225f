from __future__ import annotations

import time
from typing import Iterable

import numpy as np

from pluto.metrics.models import Frame, Summary


def order_by_latency(frames: Iterable[Frame]) -> list[Frame]:
    # sorted() is stable: frames with equal latency keep insertion order.
    return sorted(frames, key=lambda f: f.elapsed_ms)


def summarize(
    frames: Iterable[Frame],
    started: float | None = None,
    now: float | None = None,
) -> Summary:
    frames = list(frames)
    sent = [f for f in frames if f.send_success]
    ok = [f for f in sent if f.success]
    latencies = np.fromiter((f.elapsed_ms for f in ok), dtype=float, count=len(ok))
    if latencies.size:
        minimum = float(latencies.min())
        maximum = float(latencies.max())
        p50 = float(np.percentile(latencies, 50))
        p95 = float(np.percentile(latencies, 95))
        p99 = float(np.percentile(latencies, 99))
    else:
        minimum = maximum = p50 = p95 = p99 = 0.0
    # Averaged over every attempt that went out, not only the successful ones.
    average = float(latencies.sum()) / len(sent) if sent else 0.0
    if started is None:
        elapsed = 0.0
    else:
        if now is None:
            now = time.perf_counter()
        elapsed = (now - started) * 1000.0
    return Summary(
        total=len(frames),
        sent=len(sent),
        success=len(ok),
        loss=len(frames) - len(ok),
        minimum_ms=minimum,
        maximum_ms=maximum,
        average_ms=average,
        p50_ms=p50,
        p95_ms=p95,
        p99_ms=p99,
        elapsed_ms=elapsed,
    )
