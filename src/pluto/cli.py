from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from pluto import __version__
from pluto.config import (
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
from pluto.metrics import Summary
from pluto.report import format_summary
from pluto.session import Session, interrupt_handler, run_session

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pluto", description="Ping a host over TCP or HTTP")
    parser.add_argument("host", help="Target host address")
    parser.add_argument("port", type=int, nargs="?", default=DEFAULT_PORT, help="Target host port")
    parser.add_argument("-c", "--count", type=int, default=DEFAULT_COUNT, help="Number of attempts")
    parser.add_argument(
        "-m",
        "--method",
        type=str.lower,
        choices=[m.value for m in PingMethod],
        default=PingMethod.TCP.value,
        help="Probe protocol",
    )
    parser.add_argument("-w", "--wait", action="store_true", help="Wait for the HTTP response (http only)")
    parser.add_argument("-b", "--bytes", type=int, default=DEFAULT_BYTES, help="Payload size in bytes")
    parser.add_argument(
        "-X",
        "--request",
        type=str.upper,
        choices=[m.value for m in HttpMethod],
        default=HttpMethod.GET.value,
        help="HTTP request method",
    )
    parser.add_argument("-t", "--unbounded", action="store_true", help="Ping until interrupted")
    parser.add_argument(
        "--connect-timeout",
        type=int,
        default=DEFAULT_TIMEOUT_MS,
        metavar="MS",
        help="Per-attempt connect timeout in milliseconds",
    )
    parser.add_argument(
        "-i",
        "--interval",
        type=int,
        default=DEFAULT_INTERVAL_MS,
        metavar="MS",
        help="Delay between attempts in milliseconds",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> SessionConfig:
    return SessionConfig(
        host=args.host,
        port=args.port,
        method=PingMethod.parse(args.method),
        count=args.count,
        unbounded=args.unbounded,
        timeout_ms=args.connect_timeout,
        payload_size=args.bytes,
        http_method=HttpMethod.parse(args.request),
        wait=args.wait,
        interval_ms=args.interval,
    )


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else log_level_from_env()
    logging.basicConfig(level=level, format=LOG_FORMAT)


async def _run(session: Session) -> Summary:
    cancel = asyncio.Event()
    with interrupt_handler(cancel):
        return await run_session(session, cancel)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        setup_logging(args.verbose)
        session = Session.build(config_from_args(args))
    except ConfigError as exc:
        print(f"pluto: error: {exc}", file=sys.stderr)
        return 1
    logger.debug("Session config: %s", dict(session.config.to_metadata()))

    try:
        summary = asyncio.run(_run(session))
    except KeyboardInterrupt:
        summary = session.summarize()
    print(format_summary(session.config.host, session.config.port, summary))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
