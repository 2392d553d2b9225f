from __future__ import annotations

from pluto.config.models import (
    DEFAULT_BYTES,
    DEFAULT_COUNT,
    DEFAULT_INTERVAL_MS,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT_MS,
    ConfigError,
    HttpMethod,
    PingMethod,
    SessionConfig,
    log_level_from_env,
)

__all__ = [
    "DEFAULT_BYTES",
    "DEFAULT_COUNT",
    "DEFAULT_INTERVAL_MS",
    "DEFAULT_PORT",
    "DEFAULT_TIMEOUT_MS",
    "ConfigError",
    "HttpMethod",
    "PingMethod",
    "SessionConfig",
    "log_level_from_env",
]
