"""Exception hierarchy for osproj.

Every error message includes what happened and what to do next.
The CLI prints these verbatim after an ``Error:`` prefix.
"""

from __future__ import annotations


class OsprojError(Exception):
    """Base class for all osproj errors."""


class StateReadError(OsprojError):
    """The active-project state file exists but could not be read."""

    def __init__(self, path: str, detail: str):
        super().__init__(
            f"Could not read active-project file '{path}': {detail}. "
            f"Check its permissions, or remove it and run set-project again."
        )
        self.path = path
        self.detail = detail


class StateWriteError(OsprojError):
    """The active-project state file could not be written."""

    def __init__(self, path: str, detail: str):
        super().__init__(
            f"Could not write active-project file '{path}': {detail}. "
            f"Check that the directory exists and is writable. "
            f"The previous active project (if any) was not changed."
        )
        self.path = path
        self.detail = detail


class StateFormatError(OsprojError):
    """The state file exists but does not hold an ID line and a name line."""

    def __init__(self, path: str, lines: int):
        super().__init__(
            f"Invalid format in config file '{path}': expected 2 lines "
            f"(project ID, project name), found {lines}. "
            f"Run set-project <project-id> <project-name> to rewrite it."
        )
        self.path = path
        self.lines = lines


class ToolInvocationError(OsprojError):
    """The external command-line tool could not be run or exited non-zero."""

    def __init__(self, argv: list[str], detail: str, returncode: int | None = None):
        cmd = " ".join(argv)
        if returncode is None:
            msg = (
                f"Could not run '{cmd}': {detail}. "
                f"Check that '{argv[0]}' is installed and on your PATH."
            )
        else:
            msg = f"'{cmd}' exited with status {returncode}"
            if detail:
                msg += f": {detail}"
        super().__init__(msg)
        self.argv = list(argv)
        self.detail = detail
        self.returncode = returncode


class ProjectNotFound(OsprojError):
    """Project ID is not in the directory returned by the external tool."""

    def __init__(self, project_id: str):
        super().__init__(
            f"Project ID not found: {project_id}. "
            f"Use show-projects to see available projects, "
            f"then set-project to pick one of them."
        )
        self.project_id = project_id


class ConfigError(OsprojError):
    """The osproj.yaml settings file is invalid."""

    def __init__(self, path: str, detail: str):
        super().__init__(
            f"Configuration error in '{path}': {detail}. "
            f"Fix the file or delete it to fall back to the defaults."
        )
        self.path = path
        self.detail = detail
