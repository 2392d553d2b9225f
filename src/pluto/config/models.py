from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

DEFAULT_PORT = 80
DEFAULT_COUNT = 4
DEFAULT_BYTES = 56
DEFAULT_TIMEOUT_MS = 500
DEFAULT_INTERVAL_MS = 500

LOG_LEVEL_ENV = "PLUTO_LOG_LEVEL"


class ConfigError(ValueError):
    """Invalid session configuration, raised before any probe is issued."""


class PingMethod(str, Enum):
    TCP = "tcp"
    HTTP = "http"

    @classmethod
    def parse(cls, value: str) -> PingMethod:
        try:
            return cls(value.lower())
        except ValueError:
            msg = f"Unknown ping method: {value}"
            raise ConfigError(msg) from None


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    PATCH = "PATCH"
    TRACE = "TRACE"
    CONNECT = "CONNECT"

    @classmethod
    def parse(cls, value: str) -> HttpMethod:
        try:
            return cls(value.upper())
        except ValueError:
            msg = f"Unknown HTTP method: {value}"
            raise ConfigError(msg) from None


@dataclass(frozen=True, slots=True)
class SessionConfig:
    host: str
    port: int = DEFAULT_PORT
    method: PingMethod = PingMethod.TCP
    count: int = DEFAULT_COUNT
    unbounded: bool = False
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    payload_size: int = DEFAULT_BYTES
    http_method: HttpMethod = HttpMethod.GET
    wait: bool = False  # http only
    interval_ms: int = DEFAULT_INTERVAL_MS

    @property
    def timeout_sec(self) -> float:
        return self.timeout_ms / 1000.0

    @property
    def interval_sec(self) -> float:
        return self.interval_ms / 1000.0

    def validate(self) -> SessionConfig:
        if not self.host:
            raise ConfigError("no host")
        if not 0 < self.port < 65536:
            msg = f"Port out of range: {self.port}"
            raise ConfigError(msg)
        if not self.unbounded and self.count < 1:
            msg = f"Count must be positive, got {self.count}"
            raise ConfigError(msg)
        if self.payload_size < 0:
            msg = f"Payload size must not be negative, got {self.payload_size}"
            raise ConfigError(msg)
        if self.timeout_ms <= 0:
            msg = f"Connect timeout must be positive, got {self.timeout_ms}ms"
            raise ConfigError(msg)
        if self.interval_ms < 0:
            msg = f"Interval must not be negative, got {self.interval_ms}ms"
            raise ConfigError(msg)
        return self

    def to_metadata(self) -> Mapping[str, Any]:
        return {
            "host": self.host,
            "port": self.port,
            "method": self.method.value,
            "count": None if self.unbounded else self.count,
            "timeout_ms": self.timeout_ms,
            "payload_size": self.payload_size,
            "http": {
                "method": self.http_method.value,
                "wait": self.wait,
            },
            "interval_ms": self.interval_ms,
        }


def log_level_from_env(default: int = logging.INFO) -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    msg = f"Invalid {LOG_LEVEL_ENV}: {name}"
    raise ConfigError(msg)
