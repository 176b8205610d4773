"""Pytest configuration and fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest

from ric.workspace.base import ExecResult


class RecordingReporter:
    """StatusReporter that keeps every message it receives."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def name(self, text: str) -> str:
        return text

    def start(self, message: str) -> None:
        self.events.append(("start", message))

    def update(self, message: str) -> None:
        self.events.append(("update", message))

    def succeed(self, message: str) -> None:
        self.events.append(("succeed", message))

    def fail(self, message: str) -> None:
        self.events.append(("fail", message))

    def stop(self) -> None:
        self.events.append(("stop", ""))

    @property
    def messages(self) -> list[str]:
        return [message for _, message in self.events if message]


class FakeRunner:
    """Command runner returning canned exit codes keyed by program/subcommand."""

    def __init__(self, failures: dict[str, int] | None = None) -> None:
        self.failures = failures or {}
        self.calls: list[dict] = []

    async def __call__(self, command, cwd=None, env=None) -> ExecResult:
        self.calls.append({"command": command, "cwd_at_call": Path.cwd(), "env": env})
        key = " ".join(command[:2])
        return_code = self.failures.get(key, 0)
        return ExecResult(
            command=command,
            stdout="",
            stderr="fatal: boom" if return_code else "",
            return_code=return_code,
        )

    @property
    def commands(self) -> list[list[str]]:
        return [call["command"] for call in self.calls]


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def restore_cwd() -> Generator[Path, None, None]:
    """Guarantee the test leaves the working directory unchanged."""
    original = Path.cwd()
    yield original
    assert Path.cwd() == original


@pytest.fixture
def make_runner():
    """Factory for FakeRunner instances with configured failures."""
    return FakeRunner
