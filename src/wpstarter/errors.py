"""Failure contracts for the scaffolding flow.

Expected failures (missing tools, an occupied target directory, unreadable
preferences) raise ScaffoldFailure subclasses. Failing external commands
raise ``exec.CommandExecutionError``. Programmer bugs raise normal exceptions.
"""

from __future__ import annotations


class ScaffoldFailure(Exception):
    """Expected failure that stops a run before anything is cloned.

    The command layer prints the message, followed by ``recovery_hint`` when
    one is set, and exits with status 1.
    """

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__(message)
        self.recovery_hint = recovery_hint


class DependencyMissingError(ScaffoldFailure):
    """Required external executable is missing or unusable."""


class TargetConflictError(ScaffoldFailure):
    """Target directory already holds files."""


class IoFailedError(ScaffoldFailure):
    """Stored preferences could not be read."""
