"""Shared test fixtures for osproj."""

from __future__ import annotations

from pathlib import Path

import pytest

from osproj.errors import ToolInvocationError


class FakeRunner:
    """Runner double: canned listing output, records every argv."""

    def __init__(self, listing: str = "", returncode: int = 0, fail: bool = False):
        self.listing = listing
        self.returncode = returncode
        self.fail = fail
        self.captured: list[list[str]] = []
        self.streamed: list[list[str]] = []

    def capture(self, argv: list[str]) -> str:
        self.captured.append(list(argv))
        if self.fail:
            raise ToolInvocationError(argv, "No such file or directory")
        return self.listing

    def stream(self, argv: list[str]) -> int:
        self.streamed.append(list(argv))
        if self.fail:
            raise ToolInvocationError(argv, "No such file or directory")
        return self.returncode


@pytest.fixture
def make_runner():
    """Factory for FakeRunner instances."""
    return FakeRunner


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """An empty working directory with no state or settings file."""
    d = tmp_path / "work"
    d.mkdir()
    return d


@pytest.fixture
def active_state(workdir: Path) -> Path:
    """Working directory whose state file selects p1 / ProjectOne."""
    (workdir / "config").write_text("p1\nProjectOne", encoding="utf-8")
    return workdir
