from __future__ import annotations

from pluto.probe.base import FILL_BYTE, Prober
from pluto.probe.connector import (
    ConnectFailed,
    Connection,
    ConnectTimeout,
    ProbeError,
    ReceiveFailed,
    SendFailed,
    connect,
)
from pluto.probe.http import build_request, http_ping
from pluto.probe.tcp import tcp_ping

__all__ = [
    "FILL_BYTE",
    "ConnectFailed",
    "ConnectTimeout",
    "Connection",
    "ProbeError",
    "Prober",
    "ReceiveFailed",
    "SendFailed",
    "build_request",
    "connect",
    "http_ping",
    "tcp_ping",
]
