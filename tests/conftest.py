"""Shared pytest fixtures for clf2tab tests."""
from __future__ import annotations

from pathlib import Path

import pytest

from clf2tab.config import Settings
from clf2tab.parsers.clf import CLFParser


@pytest.fixture()
def tmp_log_file(tmp_path: Path):
    """Return a factory that creates temporary log files."""

    def _make(lines: list[str], name: str = "access.log") -> Path:
        p = tmp_path / name
        p.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return p

    return _make


@pytest.fixture()
def settings() -> Settings:
    return Settings(skip_validation=False, _env_file=None)


@pytest.fixture()
def lax_settings() -> Settings:
    return Settings(skip_validation=True, _env_file=None)


@pytest.fixture()
def parser(settings: Settings) -> CLFParser:
    return CLFParser(settings)


@pytest.fixture()
def common_line() -> str:
    return '127.0.0.1 - frank [10/Oct/2000:13:55:36 -0700] "GET /apache_pb.gif HTTP/1.0" 200 2326'


@pytest.fixture()
def combined_line(common_line: str) -> str:
    return common_line + ' "http://www.example.com/start.html" "Mozilla/4.08 [en] (Win98; I ;Nav)"'


@pytest.fixture()
def access_log_lines(common_line: str, combined_line: str) -> list[str]:
    return [
        common_line,
        combined_line,
        '10.0.0.1 alice - [04/Apr/2012:10:37:29 -0500] "GET / HTTP/1.1" 200 512',
        '192.168.1.2 - - [01/Aug/2025:10:00:00 +0000] "GET /missing HTTP/1.1" 404 128 "-" "curl/8.0"',
    ]
