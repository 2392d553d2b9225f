from __future__ import annotations

import pytest

from pluto.cli import build_parser, config_from_args, main
from pluto.config import HttpMethod, PingMethod
from pluto.metrics import Summary
from pluto.report import format_summary


def test_defaults() -> None:
    config = config_from_args(build_parser().parse_args(["example.com"]))
    assert config.host == "example.com"
    assert config.port == 80
    assert config.count == 4
    assert config.method is PingMethod.TCP
    assert config.payload_size == 56
    assert config.http_method is HttpMethod.GET
    assert config.wait is False
    assert config.unbounded is False
    assert config.timeout_ms == 500
    assert config.interval_ms == 500


def test_http_options() -> None:
    args = build_parser().parse_args(["example.com", "8080", "-m", "HTTP", "-X", "post", "-w", "-b", "0", "-t"])
    config = config_from_args(args)
    assert config.port == 8080
    assert config.method is PingMethod.HTTP
    assert config.http_method is HttpMethod.POST
    assert config.wait is True
    assert config.payload_size == 0
    assert config.unbounded is True


def test_missing_host_is_usage_error(capsys) -> None:
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args([])
    assert info.value.code == 2
    assert "host" in capsys.readouterr().err


def test_invalid_config_exits_non_zero(capsys) -> None:
    assert main(["example.com", "-c", "0"]) == 1
    assert "Count must be positive" in capsys.readouterr().err


@pytest.mark.network
def test_closed_port_prints_summary(closed_port, capsys) -> None:
    assert main(["127.0.0.1", str(closed_port), "-c", "2", "-i", "0"]) == 0
    out = capsys.readouterr().out
    assert f"Ping statistics for 127.0.0.1:{closed_port}" in out
    assert "2 packets sent, 0 success, 2 loss (100.0% loss)" in out
    assert "Average = 0.000ms" in out


def test_summary_block() -> None:
    summary = Summary(
        total=4,
        sent=4,
        success=3,
        loss=1,
        minimum_ms=1.5,
        maximum_ms=4.0,
        average_ms=2.0,
        p50_ms=2.0,
        p95_ms=3.8,
        p99_ms=3.96,
        elapsed_ms=1512.0,
    )
    text = format_summary("example.com", 80, summary)
    assert "4 packets sent, 3 success, 1 loss (25.0% loss), time 1512ms" in text
    assert "Minimum = 1.500ms, Maximum = 4.000ms, Average = 2.000ms" in text
