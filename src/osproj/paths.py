"""Canonical file names for osproj.

Single source of truth for the default file names.
All code should import from here rather than hard-coding them.

Layout (all relative to the working directory):
  ./config        state_path()     — active project ID and name, two lines
  ./osproj.yaml   settings_path()  — optional settings
"""

from __future__ import annotations

from pathlib import Path

STATE_FILE = "config"
SETTINGS_FILE = "osproj.yaml"


def state_path(directory: Path, name: str = STATE_FILE) -> Path:
    """Return the active-project file inside *directory*.

    *name* may itself be absolute, in which case *directory* is ignored.
    """
    return directory / name


def settings_path(directory: Path) -> Path:
    """Return <directory>/osproj.yaml."""
    return directory / SETTINGS_FILE
