from __future__ import annotations

from pluto.session.models import Session, SessionState
from pluto.session.runner import AttemptCallback, interrupt_handler, run_session

__all__ = ["AttemptCallback", "Session", "SessionState", "interrupt_handler", "run_session"]
