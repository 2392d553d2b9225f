from __future__ import annotations

import asyncio
import contextlib
import logging
import signal
from typing import Callable, Iterator

from pluto.metrics import Frame, Summary
from pluto.probe import ProbeError
from pluto.report import format_attempt, format_failure
from pluto.session.models import Session, SessionState

logger = logging.getLogger(__name__)

AttemptCallback = Callable[[int, Frame], None]


async def run_session(
    session: Session,
    cancel: asyncio.Event | None = None,
    on_attempt: AttemptCallback | None = None,
) -> Summary:
    """Drive the session until its count is exhausted or ``cancel`` is set.

    The attempt loop and a listener on ``cancel`` race; the first to finish
    decides the terminal state. The summary is computed either way.
    """
    if cancel is None:
        cancel = asyncio.Event()
    session.start()
    loop_task = asyncio.create_task(_attempt_loop(session, cancel, on_attempt))
    cancel_task = asyncio.create_task(cancel.wait())
    done, _ = await asyncio.wait({loop_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED)

    if loop_task in done:
        cancel_task.cancel()
        exhausted = loop_task.result()
    else:
        exhausted = await _drain(loop_task, session.config.timeout_sec)

    session.state = SessionState.COMPLETED if exhausted else SessionState.CANCELLED
    logger.debug("Session %s after %d attempts", session.state.value, len(session.frames))
    return session.summarize()


async def _attempt_loop(
    session: Session,
    cancel: asyncio.Event,
    on_attempt: AttemptCallback | None,
) -> bool:
    config = session.config
    issued = 0
    while config.unbounded or issued < config.count:
        if cancel.is_set():
            return False
        if issued and not await _sleep_unless_cancelled(cancel, config.interval_sec):
            return False
        issued += 1
        try:
            frame = await session.ping()
        except ProbeError as exc:
            frame = session.frames[-1]
            logger.warning("%s", format_failure(issued, exc))
        else:
            logger.info("%s", format_attempt(issued, frame))
        if on_attempt is not None:
            on_attempt(issued, frame)
    return True


async def _sleep_unless_cancelled(cancel: asyncio.Event, delay: float) -> bool:
    try:
        await asyncio.wait_for(cancel.wait(), timeout=delay)
    except asyncio.TimeoutError:
        return True
    return False


async def _drain(loop_task: asyncio.Task[bool], grace: float) -> bool:
    # The loop sees the cancel flag once the in-flight attempt returns.
    done, _ = await asyncio.wait({loop_task}, timeout=grace)
    if loop_task in done:
        return loop_task.result()
    logger.debug("Abandoning in-flight attempt after %.0fms", grace * 1000.0)
    loop_task.cancel()
    # asyncio.wait leaves a cancellation of run_session itself free to propagate.
    await asyncio.wait({loop_task})
    if loop_task.cancelled():
        return False
    return loop_task.result()


@contextlib.contextmanager
def interrupt_handler(cancel: asyncio.Event) -> Iterator[list[signal.Signals]]:
    """Set ``cancel`` on SIGINT/SIGTERM for the duration of the block.

    Yields the signals actually bound; platforms without loop signal support
    get an empty list and rely on KeyboardInterrupt instead.
    """
    loop = asyncio.get_running_loop()
    installed: list[signal.Signals] = []
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, cancel.set)
        except (NotImplementedError, RuntimeError) as exc:
            logger.debug("Cannot bind %s: %s", sig.name, exc)
            continue
        installed.append(sig)
    try:
        yield installed
    finally:
        for sig in installed:
            loop.remove_signal_handler(sig)
