"""Running the external command-line tool.

Two modes are needed: ``capture`` collects stdout for parsing (project
listing), ``stream`` hands the terminal to the child (pass-through).
Anything with these two methods can stand in for SubprocessRunner, which
is how the tests avoid needing a real ``openstack`` binary.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Protocol

from osproj.errors import ToolInvocationError

logger = logging.getLogger(__name__)


class Runner(Protocol):
    def capture(self, argv: list[str]) -> str:
        """Run *argv*, return its stdout. Raise ToolInvocationError on failure."""
        ...

    def stream(self, argv: list[str]) -> int:
        """Run *argv* with inherited stdout/stderr, return its exit status."""
        ...


class SubprocessRunner:
    """Runner backed by :func:`subprocess.run`."""

    def capture(self, argv: list[str]) -> str:
        logger.debug("Running %s", argv)
        try:
            result = subprocess.run(
                argv, capture_output=True, text=True, encoding="utf-8", errors="replace"
            )
        except OSError as exc:
            raise ToolInvocationError(argv, exc.strerror or str(exc)) from exc

        if result.returncode != 0:
            raise ToolInvocationError(argv, result.stderr.strip(), result.returncode)
        return result.stdout

    def stream(self, argv: list[str]) -> int:
        logger.debug("Streaming %s", argv)
        try:
            # No capture: the child writes straight to our stdout/stderr.
            result = subprocess.run(argv)
        except OSError as exc:
            raise ToolInvocationError(argv, exc.strerror or str(exc)) from exc
        logger.debug("%s exited with %d", argv[0], result.returncode)
        return result.returncode
