from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Awaitable, Callable, Iterator

from pluto.metrics import Frame
from pluto.probe.connector import ProbeError

if TYPE_CHECKING:
    from pluto.session import Session

FILL_BYTE = b"\x00"

Prober = Callable[["Session"], Awaitable[Frame]]


def payload(size: int) -> bytes:
    return FILL_BYTE * size


@contextmanager
def recording(frame: Frame) -> Iterator[Frame]:
    """Tag ``frame`` with the failure class of any ProbeError raised inside the block."""
    try:
        yield frame
    except ProbeError as exc:
        frame.error = exc.error_type
        raise
