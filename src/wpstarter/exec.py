"""Subprocess helpers for running external commands."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Protocol

from . import log


@dataclass(frozen=True)
class CommandRequest:
    """Typed command invocation request."""

    argv: tuple[str, ...]
    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    discard_output: bool = True
    timeout_seconds: float | None = None


@dataclass(frozen=True)
class CommandResult:
    """Typed command execution result."""

    argv: tuple[str, ...]
    returncode: int
    timed_out: bool = False


class CommandRunner(Protocol):
    """Runtime command-execution interface."""

    def run(self, request: CommandRequest) -> CommandResult | None: ...


class SubprocessCommandRunner:
    """Default command-runner adapter backed by subprocess.

    Blocks until the child exits. Returns ``None`` when the executable cannot
    be started (not found, not executable, or any other ``OSError``).
    """

    def run(self, request: CommandRequest) -> CommandResult | None:
        run_kwargs: dict[str, object] = {
            "cwd": request.cwd,
            "env": request.env,
            "check": False,
        }
        if request.discard_output:
            run_kwargs["stdout"] = subprocess.DEVNULL
            run_kwargs["stderr"] = subprocess.DEVNULL
        if request.timeout_seconds is not None:
            run_kwargs["timeout"] = request.timeout_seconds
        try:
            completed = subprocess.run(list(request.argv), **run_kwargs)
        except OSError:
            return None
        except subprocess.TimeoutExpired:
            return CommandResult(argv=request.argv, returncode=124, timed_out=True)
        return CommandResult(argv=request.argv, returncode=completed.returncode)


_DEFAULT_COMMAND_RUNNER: CommandRunner = SubprocessCommandRunner()


def default_runner() -> CommandRunner:
    """Return the process-wide subprocess runner."""
    return _DEFAULT_COMMAND_RUNNER


class CommandExecutionError(RuntimeError):
    """Raised when an external command is missing or exits non-zero."""

    def __init__(
        self,
        request: CommandRequest,
        detail: str,
        result: CommandResult | None = None,
    ) -> None:
        super().__init__(detail)
        self.request = request
        self.detail = detail
        self.result = result

    def __str__(self) -> str:
        return self.detail


def run_with_runner(
    request: CommandRequest, *, runner: CommandRunner | None = None
) -> CommandResult | None:
    """Execute a typed command request with the given runner."""
    active_runner = runner or _DEFAULT_COMMAND_RUNNER
    where = f" (in {request.cwd})" if request.cwd else ""
    log.debug(f"$ {' '.join(request.argv)}{where}")
    return active_runner.run(request)


def _missing_command_detail(request: CommandRequest) -> str:
    argv = request.argv
    if not argv:
        return "missing required command"
    return f"missing required command: {argv[0]}"


def _command_failure_detail(request: CommandRequest, result: CommandResult) -> str:
    command_text = " ".join(request.argv)
    if result.timed_out:
        return f"command timed out: {command_text}"
    return f"command failed: {command_text} (exit {result.returncode})"


def run_checked(
    request: CommandRequest, *, runner: CommandRunner | None = None
) -> CommandResult:
    """Execute a command and raise ``CommandExecutionError`` unless it succeeds.

    Example:
        >>> run_checked(CommandRequest(argv=("true",))).returncode
        0
    """
    result = run_with_runner(request, runner=runner)
    if result is None:
        raise CommandExecutionError(
            request=request,
            detail=_missing_command_detail(request),
        )
    if result.returncode != 0:
        raise CommandExecutionError(
            request=request,
            result=result,
            detail=_command_failure_detail(request, result),
        )
    return result
