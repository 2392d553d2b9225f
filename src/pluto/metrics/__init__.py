from __future__ import annotations

from pluto.metrics.aggregator import order_by_latency, summarize
from pluto.metrics.models import ErrorType, Frame, FrameOutcome, Summary
from pluto.metrics.timing import calculate_delay, start_frame

__all__ = [
    "ErrorType",
    "Frame",
    "FrameOutcome",
    "Summary",
    "calculate_delay",
    "order_by_latency",
    "start_frame",
    "summarize",
]
