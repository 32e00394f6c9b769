"""Checks that the external tools the installer shells out to are present."""

from __future__ import annotations

from dataclasses import dataclass

from . import exec as exec_util
from .errors import DependencyMissingError


@dataclass(frozen=True)
class RequiredTool:
    command: str
    name: str


REQUIRED_TOOLS: tuple[RequiredTool, ...] = (
    RequiredTool("mysql", "MySQL client"),
    RequiredTool("git", "Git"),
    RequiredTool("php", "PHP"),
    RequiredTool("wp", "WP-CLI"),
    RequiredTool("npm", "npm"),
)


def tool_available(
    tool: RequiredTool, *, runner: exec_util.CommandRunner | None = None
) -> bool:
    """Return whether ``<command> --version`` runs and exits zero."""
    result = exec_util.run_with_runner(
        exec_util.CommandRequest(argv=(tool.command, "--version")),
        runner=runner,
    )
    return result is not None and result.returncode == 0


def ensure_required_tools(
    tools: tuple[RequiredTool, ...] = REQUIRED_TOOLS,
    *,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    """Fail on the first required tool that does not answer a version query.

    Raises:
        DependencyMissingError: A tool is missing or its version query failed.
    """
    for tool in tools:
        if not tool_available(tool, runner=runner):
            raise DependencyMissingError(
                f"{tool.name} is not installed.",
                recovery_hint=f"install {tool.name} and make sure `{tool.command}` is on PATH",
            )
