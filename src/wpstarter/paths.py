"""Path helpers for locating the scaffold target and stored preferences."""

from __future__ import annotations

from pathlib import Path

DEFAULT_TARGET_NAME = "wpstarter"
TEMPLATE_REPO_URL = "https://github.com/msteinerweb/wpstarter.git"
SITE_CONFIG_FILENAME = "config.js"
PREFERENCES_DIRNAME = ".wpstarter"
PREFERENCES_FILENAME = "config.json"


def resolve_target_dir(name: str | None, cwd: Path) -> Path:
    """Return the absolute directory the template is cloned into.

    Args:
        name: Directory name from the command line, or ``None`` for the
            default.
        cwd: Working directory the name is joined to.

    Returns:
        Absolute target directory path, always nested under ``cwd``.

    Raises:
        ValueError: ``name`` is an absolute path.

    Example:
        >>> resolve_target_dir(None, Path("/srv")).as_posix()
        '/srv/wpstarter'
        >>> resolve_target_dir("blog", Path("/srv")).as_posix()
        '/srv/blog'
    """
    relative = Path(name or DEFAULT_TARGET_NAME)
    if relative.is_absolute():
        raise ValueError(
            f"target must be relative to the current directory: {relative}"
        )
    return Path(cwd).absolute() / relative


def site_config_path(target_dir: Path) -> Path:
    """Return the template configuration file patched after cloning.

    Example:
        >>> site_config_path(Path("/srv/blog")).name
        'config.js'
    """
    return target_dir / SITE_CONFIG_FILENAME


def preferences_dir() -> Path:
    """Return the per-user directory holding stored preferences."""
    return Path.home() / PREFERENCES_DIRNAME


def preferences_path() -> Path:
    """Return the per-user stored preferences file.

    Example:
        >>> preferences_path().name
        'config.json'
    """
    return preferences_dir() / PREFERENCES_FILENAME


def ensure_dir(path: Path) -> None:
    """Create a directory if it does not exist."""
    path.mkdir(parents=True, exist_ok=True)


def dir_is_empty(path: Path) -> bool:
    """Return whether ``path`` is missing or an empty directory.

    Raises:
        NotADirectoryError: ``path`` exists but is not a directory.
    """
    if not path.exists():
        return True
    if not path.is_dir():
        raise NotADirectoryError(str(path))
    return next(path.iterdir(), None) is None
