from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from typing import Any

import pytest
import requests


@dataclass
class FakeResponse:
    status_code: int = 200
    content: bytes = b""


@dataclass
class FakeHttp:
    """Stands in for ``requests.Session`` and records every GET."""

    response: FakeResponse | None = None
    error: Exception | None = None
    calls: list[dict[str, Any]] = field(default_factory=list)

    def get(self, url: str, *, headers: dict[str, str], timeout: float) -> FakeResponse:
        self.calls.append({"url": url, "headers": dict(headers), "timeout": timeout})
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


@dataclass
class FakeRunner:
    """Stands in for ``subprocess.run`` keyed by package name."""

    outcomes: dict[str, tuple[int, str]] = field(default_factory=dict)
    calls: list[dict[str, Any]] = field(default_factory=list)
    launch_error: OSError | None = None

    def __call__(self, command: list[str], **kwargs: Any) -> subprocess.CompletedProcess:
        self.calls.append({"command": list(command), **kwargs})
        if self.launch_error is not None:
            raise self.launch_error
        package = command[command.index("-p") + 1]
        returncode, stdout = self.outcomes.get(package, (0, ""))
        return subprocess.CompletedProcess(command, returncode, stdout=stdout, stderr="")


def day_output(part1: str, time1: str, part2: str, time2: str) -> str:
    return f"Part 1: {part1}\nTime: {time1}ms\nPart 2: {part2}\nTime: {time2}ms\n"


@pytest.fixture
def fake_http_ok() -> FakeHttp:
    return FakeHttp(response=FakeResponse(200, b"1 2 3\n4 5 6\n"))


@pytest.fixture
def fake_http_connection_error() -> FakeHttp:
    return FakeHttp(error=requests.ConnectionError("connection refused"))


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _no_session_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AOC_SESSION", raising=False)
    monkeypatch.delenv("MUSH_SETTINGS_FILE", raising=False)
