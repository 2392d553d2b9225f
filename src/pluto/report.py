from __future__ import annotations

from pluto.metrics import Frame, Summary


def format_attempt(seq: int, frame: Frame) -> str:
    return f"seq={seq} Connected to {frame.peer}: time={frame.elapsed_ms:.3f}ms"


def format_failure(seq: int, exc: BaseException) -> str:
    return f"seq={seq} Ping failed: {exc}"


def format_summary(host: str, port: int, summary: Summary) -> str:
    lines = [
        "",
        f"Ping statistics for {host}:{port}",
        (
            f"{summary.total} packets sent, {summary.success} success, "
            f"{summary.loss} loss ({summary.loss_pct:.1f}% loss), "
            f"time {summary.elapsed_ms:.0f}ms"
        ),
        "Approximate trip times in milliseconds:",
        (
            f"Minimum = {summary.minimum_ms:.3f}ms, "
            f"Maximum = {summary.maximum_ms:.3f}ms, "
            f"Average = {summary.average_ms:.3f}ms"
        ),
        (
            f"p50 = {summary.p50_ms:.3f}ms, "
            f"p95 = {summary.p95_ms:.3f}ms, "
            f"p99 = {summary.p99_ms:.3f}ms"
        ),
    ]
    return "\n".join(lines)
