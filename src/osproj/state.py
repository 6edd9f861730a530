"""Active-project store.

The active project is kept in a plain two-line text file::

    <project-id>
    <project-name>

A missing file means no project is active; that is not an error.
The path is always passed in, so tests can point it at ``tmp_path``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from osproj.errors import StateFormatError, StateReadError, StateWriteError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActiveProject:
    """The currently selected project."""

    project_id: str
    project_name: str


def set_active_project(project_id: str, project_name: str, path: Path) -> None:
    """Overwrite *path* with the given project ID and name.

    Raises:
        StateWriteError: If the filesystem rejects the write.
    """
    try:
        path.write_text(f"{project_id}\n{project_name}", encoding="utf-8")
    except OSError as exc:
        raise StateWriteError(str(path), exc.strerror or str(exc)) from exc
    logger.debug("Active project written to %s: %s", path, project_id)


def get_active_project(path: Path) -> ActiveProject | None:
    """Read the active project from *path*.

    Returns:
        The stored project, or None if *path* does not exist.

    Raises:
        StateFormatError: If the file has fewer than two lines.
        StateReadError: If the file exists but cannot be read as UTF-8 text.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("No active-project file at %s", path)
        return None
    except OSError as exc:
        raise StateReadError(str(path), exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise StateReadError(str(path), f"not valid UTF-8 text ({exc.reason})") from exc

    stripped = text.strip()
    lines = stripped.split("\n") if stripped else []
    if len(lines) < 2:
        raise StateFormatError(str(path), len(lines))

    return ActiveProject(project_id=lines[0].strip(), project_name=lines[1].strip())
