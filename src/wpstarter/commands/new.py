"""Implementation for the ``wpstarter`` command.

Checks the required tools, guards the target directory, asks the operator
for the site settings and then runs the scaffold pipeline.
"""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape

from .. import exec as exec_util
from .. import log, paths, preflight, questions
from ..errors import ScaffoldFailure, TargetConflictError
from ..io import die, say
from ..preferences import JsonPreferencesStore, PreferencesStore
from ..scaffold import SiteScaffolder


def _fail(error: ScaffoldFailure) -> None:
    message = str(error)
    if error.recovery_hint:
        message = f"{message}\nhint: {error.recovery_hint}"
    die(message)


def ensure_target_available(target_dir: Path, display_name: str) -> None:
    """Refuse a target directory that already holds files.

    A missing directory is fine; the clone creates it.

    Raises:
        TargetConflictError: ``target_dir`` is a file or a non-empty directory.
    """
    try:
        empty = paths.dir_is_empty(target_dir)
    except NotADirectoryError:
        raise TargetConflictError(
            f"path exists and is not a directory: {target_dir}"
        ) from None
    if not empty:
        raise TargetConflictError(
            f"The directory {display_name} already exists and is not empty. "
            "Please choose a different directory or delete the existing one."
        )


def _greet(target_dir: Path) -> None:
    log.panel(
        "[bright_green]🚀  WELCOME TO THE WPSTARTER INSTALLER[/]\n\n"
        "    We'll be installing the new site in the following directory:\n"
        f"[yellow]    >> {escape(str(target_dir))}[/]\n\n"
        "    Press Ctrl+C to stop.",
        border_style="bold white",
    )


def _print_next_steps(target_name: str) -> None:
    log.success(
        "\n🎉 Your WordPress project has been successfully set up and is ready to go!",
        style="bright_green",
    )
    log.info(
        "\nTo start the development server, navigate to your project directory:",
        style="bright_cyan",
    )
    log.info(f">> cd {target_name}\n", style="bright_yellow")
    log.info("And run the following command:", style="bright_cyan")
    log.info(">> npm run dev\n", style="bright_yellow")
    log.info("Happy coding! 🚀\n", style="bright_magenta")


def new_site(
    args: object,
    *,
    runner: exec_util.CommandRunner | None = None,
    store: PreferencesStore | None = None,
) -> None:
    """Scaffold a new local WordPress site.

    Args:
        args: CLI argument object with an optional ``target`` directory name.
        runner: Command runner for external tools; defaults to subprocess.
        store: Preferences store; defaults to ``~/.wpstarter/config.json``.

    Returns:
        None. Exits with status 1 on any failure and 0 when the operator
        cancels.

    Example:
        $ wpstarter my-site
    """
    active_runner = runner or exec_util.default_runner()
    try:
        preflight.ensure_required_tools(runner=active_runner)
    except ScaffoldFailure as exc:
        _fail(exc)

    target_name = getattr(args, "target", None) or paths.DEFAULT_TARGET_NAME
    cwd = Path.cwd()
    try:
        target_dir = paths.resolve_target_dir(target_name, cwd)
    except ValueError as exc:
        die(str(exc))
    try:
        ensure_target_available(target_dir, target_name)
    except ScaffoldFailure as exc:
        _fail(exc)

    _greet(target_dir)

    active_store = store or JsonPreferencesStore()
    try:
        preferences = active_store.load()
    except ScaffoldFailure as exc:
        _fail(exc)

    answers = questions.collect_answers(preferences)
    if not questions.confirm_installation():
        say("\nInstallation cancelled by the user. Exiting...")
        return

    log.info("\n🚀 Setting up your WordPress project...", style="bright_cyan")
    log.info("\nThis may take just a few minutes. Please wait...\n", style="bright_cyan")

    scaffolder = SiteScaffolder(
        target_dir=target_dir,
        cwd=cwd,
        store=active_store,
        runner=active_runner,
    )
    try:
        scaffolder.run(answers, preferences)
    except Exception as exc:
        die(f"installation failed: {exc}")

    _print_next_steps(target_name)
