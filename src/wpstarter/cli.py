"""Command-line entry point for wpstarter."""

from __future__ import annotations

from types import SimpleNamespace

import typer

from . import log as wpstarter_log
from . import paths
from .commands import new as new_cmd

_LOG_LEVELS = ("debug", "info", "success", "warning", "error")

app = typer.Typer(
    add_completion=False,
    help="Scaffold a local WordPress development site from the WPStarter template.",
)


def _validate_log_level(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized not in _LOG_LEVELS:
        raise typer.BadParameter(f"expected one of: {', '.join(_LOG_LEVELS)}")
    return normalized


@app.command()
def main(
    target: str = typer.Argument(
        paths.DEFAULT_TARGET_NAME,
        help="Directory (relative to the current one) to create the site in.",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        callback=_validate_log_level,
        help="Minimum log level (overrides WPSTARTER_LOG_LEVEL).",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colorized output.",
    ),
) -> None:
    """Clone the template into TARGET, configure it and install WordPress."""
    if log_level is not None:
        wpstarter_log.set_level(log_level)
    if no_color:
        wpstarter_log.set_no_color(True)
    new_cmd.new_site(SimpleNamespace(target=target))
