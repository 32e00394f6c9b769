"""Stored preferences: defaults reused across scaffold runs.

Preferences live in ``~/.wpstarter/config.json``. The file is read once at
startup, shallow-merged over the compiled-in defaults, and rewritten only
when the operator asks to save the answers of the current run.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel

from . import log, paths
from .errors import IoFailedError
from .models import AnswerSet, StoredPreferences

_CREDENTIAL_FIELDS = (
    "db_user",
    "db_pass",
    "db_host",
    "admin_user",
    "admin_password",
    "admin_email",
)


def load_json(path: Path) -> object | None:
    """Load a JSON file if it exists.

    Returns:
        Parsed payload, or ``None`` if the file does not exist.
    """
    if not path.exists():
        return None
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def write_json(path: Path, payload: dict | BaseModel) -> None:
    """Write a JSON payload to disk with two-space indentation."""
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(by_alias=True)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2)
        fh.write("\n")


def merge_preferences(payload: dict | None) -> StoredPreferences:
    """Overlay a stored payload's top-level keys on the compiled-in defaults.

    Example:
        >>> merged = merge_preferences({"dbHost": "127.0.0.1"})
        >>> merged.db_host, merged.db_user, len(merged.recommended_plugins)
        ('127.0.0.1', '', 3)
    """
    merged = StoredPreferences().to_payload()
    if payload:
        merged.update(payload)
    return StoredPreferences.model_validate(merged)


def updated_preferences(
    answers: AnswerSet, previous: StoredPreferences
) -> StoredPreferences:
    """Build the record to persist from this run's answers.

    The plugin catalog keeps its entries and order; only each ``enabled``
    flag is recomputed from the operator's selection.
    """
    selected = set(answers.plugins)
    plugins = [
        plugin.model_copy(update={"enabled": plugin.name in selected})
        for plugin in previous.recommended_plugins
    ]
    update: dict[str, object] = {
        name: getattr(answers, name) for name in _CREDENTIAL_FIELDS
    }
    update["recommended_plugins"] = plugins
    return previous.model_copy(update=update)


class PreferencesStore(Protocol):
    """Load/save interface for stored preferences."""

    def load(self) -> StoredPreferences: ...

    def save(
        self, answers: AnswerSet, previous: StoredPreferences
    ) -> StoredPreferences: ...


class JsonPreferencesStore:
    """Preferences store backed by a JSON file."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or paths.preferences_path()

    def load(self) -> StoredPreferences:
        try:
            payload = load_json(self.path)
            if payload is not None and not isinstance(payload, dict):
                raise ValueError("expected a JSON object")
            return merge_preferences(payload)
        except ValueError as exc:
            raise IoFailedError(
                f"could not read stored preferences {self.path}: {exc}",
                recovery_hint="fix or delete the file and run again",
            ) from exc

    def save(
        self, answers: AnswerSet, previous: StoredPreferences
    ) -> StoredPreferences:
        updated = updated_preferences(answers, previous)
        paths.ensure_dir(self.path.parent)
        write_json(self.path, updated.to_payload())
        log.debug(f"saved preferences to {self.path}")
        return updated
