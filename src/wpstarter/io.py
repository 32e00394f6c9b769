"""Console I/O helpers for user-facing messages and prompts."""

from __future__ import annotations

import sys
from typing import Any, Mapping, Sequence

import questionary


def say(message: str) -> None:
    """Print a normal message to stdout.

    Args:
        message: Text to print.

    Returns:
        None.

    Example:
        >>> say("Hello")
        Hello
    """
    print(message)


def die(message: str, code: int = 1) -> None:
    """Print an error message and exit.

    Args:
        message: Error message to display.
        code: Exit code to use.

    Returns:
        None. Exits the process via ``sys.exit``.
    """
    print(f"error: {message}", file=sys.stderr)
    sys.exit(code)


def ask(questions: Sequence[Mapping[str, Any]]) -> dict[str, Any]:
    """Run a questionary question list and return the answers by name.

    Interrupts propagate to the caller instead of being turned into an empty
    answer set.

    Args:
        questions: Question dicts in questionary's ``prompt`` format.

    Returns:
        Mapping of question name to answer.
    """
    return questionary.unsafe_prompt(list(questions))


def confirm(text: str, default: bool = False) -> bool:
    """Prompt for a yes/no confirmation.

    Args:
        text: Prompt label shown to the user.
        default: Default answer when the user presses enter.

    Returns:
        ``True`` when the user confirms.
    """
    response = questionary.confirm(text, default=default).unsafe_ask()
    return bool(response)
