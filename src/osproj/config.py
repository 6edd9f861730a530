"""osproj settings — loads and validates osproj.yaml.

The settings file is optional and lives in the working directory next to
the active-project file. Every key is optional; a missing file means all
defaults::

    # External command-line tool that osproj wraps.
    tool: openstack

    # File holding the active project (ID on line 1, name on line 2).
    # Relative paths are resolved against the working directory;
    # an absolute path is used as-is.
    state_file: config

    # Flag appended to pass-through commands as <flag>=<project-id>.
    project_flag: --os-project-id

    # DEBUG shows every external command line osproj runs.
    log_level: WARNING
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from osproj.errors import ConfigError
from osproj.paths import STATE_FILE, settings_path

DEFAULT_TOOL = "openstack"
DEFAULT_PROJECT_FLAG = "--os-project-id"
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Parsed osproj.yaml."""

    tool: str = DEFAULT_TOOL
    state_file: str = STATE_FILE
    project_flag: str = DEFAULT_PROJECT_FLAG
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)


def _string(data: dict, key: str, default: str, p: Path) -> str:
    value = data.get(key, default)
    if value is None:
        return default
    value = str(value).strip()
    if not value:
        raise ConfigError(str(p), f"'{key}' must not be empty")
    return value


def load_settings(directory: Path) -> Settings:
    """Load and validate osproj.yaml. Returns defaults if the file is missing."""
    p = settings_path(directory)
    if not p.exists():
        return Settings()

    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(str(p), e.strerror or str(e)) from e

    try:
        data = yaml.safe_load(raw) or {}
    except yaml.YAMLError as e:
        raise ConfigError(str(p), f"invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(str(p), f"expected a YAML mapping, got {type(data).__name__}")

    log_level = _string(data, "log_level", DEFAULT_LOG_LEVEL, p).upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigError(
            str(p), f"unknown log_level '{log_level}' (use one of {', '.join(_LOG_LEVELS)})"
        )

    return Settings(
        tool=_string(data, "tool", DEFAULT_TOOL, p),
        state_file=_string(data, "state_file", STATE_FILE, p),
        project_flag=_string(data, "project_flag", DEFAULT_PROJECT_FLAG, p),
        log_level=log_level,
    )
