#!/usr/bin/env python3
"""osproj — remember an active OpenStack project and inject it into commands.

Usage:
    # Pick the project subsequent commands should run against
    osproj set-project 8f2c...e1 my-project

    # Show what is active, or everything the credentials can see
    osproj show-current
    osproj show-projects

    # Anything else goes to the tool with --os-project-id=<active> appended
    osproj server list
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from osproj.config import Settings, load_settings
from osproj.directory import list_projects, resolve_name
from osproj.errors import OsprojError, ToolInvocationError
from osproj.paths import state_path
from osproj.runner import Runner, SubprocessRunner
from osproj.state import get_active_project, set_active_project

PROG = "osproj"

HELP_TEXT = f"""
Usage: {PROG} <command> [<args>]

Commands:
  set-project <project-id> <project-name>   Set the active project
  show-current                              Display the active project
  show-projects                             Display all available projects
  --help                                    Show this help message
  <openstack-command>                       Run an OpenStack CLI command with the active project

Example:
  {PROG} set-project my-project-id my-project
  {PROG} show-current
  {PROG} show-projects
  {PROG} server list
"""

NO_ACTIVE_PROJECT = "No active project set."

logger = logging.getLogger("osproj")

_stderr_handler: logging.Handler | None = None


def _configure_logging(level: int) -> None:
    """Attach a stderr handler to the package logger (idempotent)."""
    global _stderr_handler
    if _stderr_handler is None:
        _stderr_handler = logging.StreamHandler(sys.stderr)
        _stderr_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%H:%M:%S"
            )
        )
        logger.addHandler(_stderr_handler)
    # sys.stderr may have been swapped since the handler was created.
    # Plain assignment: setStream() would flush the old, possibly closed, stream.
    _stderr_handler.stream = sys.stderr
    logger.setLevel(level)


@dataclass
class Context:
    """Everything a command needs for one invocation."""

    settings: Settings
    runner: Runner
    state_file: Path


# ── Commands ─────────────────────────────────────────────────────────────


def cmd_set_project(ctx: Context, args: list[str]) -> None:
    """Persist the active project."""
    if len(args) < 2:
        print(f"Usage: {PROG} set-project <project-id> <project-name>")
        return
    project_id, project_name = args[0], args[1]
    set_active_project(project_id, project_name, ctx.state_file)
    print(f"Project set to: {project_id}")


def cmd_show_current(ctx: Context, args: list[str]) -> None:
    """Print the active project's ID and its name as the tool reports it."""
    projects = list_projects(ctx.runner, ctx.settings.tool)
    active = get_active_project(ctx.state_file)
    if active is None:
        print(NO_ACTIVE_PROJECT)
        return
    name = resolve_name(active.project_id, projects)
    print(f"Active project ID: {active.project_id}")
    print(f"Active project Name: {name}")


def cmd_show_projects(ctx: Context, args: list[str]) -> None:
    """Print every project the tool can see."""
    projects = list_projects(ctx.runner, ctx.settings.tool)
    print("Available projects:")
    for project_id, project_name in projects.items():
        print(f"{project_id} - {project_name}")


def cmd_passthrough(ctx: Context, argv: list[str]) -> None:
    """Run the tool with *argv* plus the active project flag."""
    active = get_active_project(ctx.state_file)
    if active is None:
        print(NO_ACTIVE_PROJECT)
        return

    command = [
        ctx.settings.tool,
        *argv,
        f"{ctx.settings.project_flag}={active.project_id}",
    ]
    returncode = ctx.runner.stream(command)
    if returncode != 0:
        raise ToolInvocationError(command, "", returncode)


COMMANDS: dict[str, Callable[[Context, list[str]], None]] = {
    "set-project": cmd_set_project,
    "show-current": cmd_show_current,
    "show-projects": cmd_show_projects,
}


def main(
    argv: list[str] | None = None,
    *,
    runner: Runner | None = None,
    cwd: Path | None = None,
) -> None:
    if argv is None:
        argv = sys.argv[1:]
    if not argv or argv[0] == "--help":
        print(HELP_TEXT)
        return

    workdir = cwd if cwd is not None else Path.cwd()
    try:
        settings = load_settings(workdir)
        _configure_logging(settings.level)
        ctx = Context(
            settings=settings,
            runner=runner if runner is not None else SubprocessRunner(),
            state_file=state_path(workdir, settings.state_file),
        )

        command, rest = argv[0], argv[1:]
        handler = COMMANDS.get(command)
        if handler is not None:
            logger.debug("Dispatching %s %s", command, rest)
            handler(ctx, rest)
        else:
            cmd_passthrough(ctx, argv)
    except OsprojError as exc:
        print(f"Error: {exc}")


if __name__ == "__main__":
    main()
