"""Project directory lookup via the external tool.

Asks the tool for a value-only, two-column listing::

    openstack project list -f value -c ID -c Name

and turns it into an ``{id: name}`` dict. The directory is fetched fresh
on every call and never cached.
"""

from __future__ import annotations

import logging

from osproj.config import DEFAULT_TOOL
from osproj.errors import ProjectNotFound
from osproj.runner import Runner

logger = logging.getLogger(__name__)

LIST_ARGS = ["project", "list", "-f", "value", "-c", "ID", "-c", "Name"]


def parse_project_listing(text: str) -> dict[str, str]:
    """Parse ``<id> <name>`` lines into a dict.

    Lines with fewer than two fields are skipped. Everything after the ID
    is the name, so names containing spaces survive intact. A repeated ID
    keeps its last name.
    """
    projects: dict[str, str] = {}
    for line in text.strip().splitlines():
        fields = line.split(None, 1)
        if len(fields) < 2:
            if fields:
                logger.debug("Skipping malformed project line: %r", line)
            continue
        projects[fields[0]] = fields[1].strip()
    return projects


def list_projects(runner: Runner, tool: str = DEFAULT_TOOL) -> dict[str, str]:
    """Return every project visible to *tool* as ``{id: name}``.

    Raises:
        ToolInvocationError: If the tool cannot be run or exits non-zero.
    """
    output = runner.capture([tool, *LIST_ARGS])
    projects = parse_project_listing(output)
    logger.debug("%s listed %d projects", tool, len(projects))
    return projects


def resolve_name(project_id: str, directory: dict[str, str]) -> str:
    """Look up the name for *project_id*, raising ProjectNotFound if absent."""
    try:
        return directory[project_id]
    except KeyError:
        raise ProjectNotFound(project_id) from None
