"""Interactive question flow for a new site."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

import questionary

from . import io
from .models import AnswerSet, StoredPreferences

Question = dict[str, Any]
AskQuestions = Callable[[Sequence[Mapping[str, Any]]], Mapping[str, Any]]
ConfirmChoice = Callable[[str, bool], bool]

DEFAULT_SITE_TITLE = "Website Title"
DEFAULT_BLOG_DESCRIPTION = "Just another WordPress site"
DEFAULT_THEME_NAME = "WPStarter"
PROCEED_MESSAGE = "Are you sure you want to proceed with the installation?"


def _text(name: str, message: str, default: str | None = None) -> Question:
    question: Question = {"type": "text", "name": name, "message": message}
    if default is not None:
        question["default"] = default
    return question


def _password(name: str, message: str, default: str) -> Question:
    return {"type": "password", "name": name, "message": message, "default": default}


def plugin_choices(preferences: StoredPreferences) -> list[questionary.Choice]:
    """Checkbox choices for the plugin catalog, pre-checked from preferences."""
    return [
        questionary.Choice(title=plugin.name, value=plugin.name, checked=plugin.enabled)
        for plugin in preferences.recommended_plugins
    ]


def build_questions(preferences: StoredPreferences) -> list[Question]:
    """Return the ordered question list, with defaults taken from preferences.

    Site title, description, theme and database name have fixed defaults (or
    none); credentials default to the stored values. The plugin checkbox is
    left out when the stored catalog is empty.
    """
    question_list = [
        _text("site_title", "Enter the site title:", DEFAULT_SITE_TITLE),
        _text("blog_description", "Enter the blog description:", DEFAULT_BLOG_DESCRIPTION),
        _text("theme_name", "Enter the theme name:", DEFAULT_THEME_NAME),
        _text("db_name", "Enter the database name:"),
        _text("db_user", "Enter the database user:", preferences.db_user),
        _password("db_pass", "Enter the database password:", preferences.db_pass),
        _text("db_host", "Enter the database host:", preferences.db_host),
        _text("admin_user", "Enter the admin username:", preferences.admin_user),
        _password("admin_password", "Enter the admin password:", preferences.admin_password),
        _text("admin_email", "Enter the admin email:", preferences.admin_email),
    ]
    if preferences.recommended_plugins:
        question_list.append(
            {
                "type": "checkbox",
                "name": "plugins",
                "message": "Select plugins to install:",
                "choices": plugin_choices(preferences),
            }
        )
    question_list.append(
        {
            "type": "confirm",
            "name": "save_config",
            "message": "Would you like to save these settings for future projects?",
            "default": True,
        }
    )
    return question_list


def collect_answers(
    preferences: StoredPreferences, *, ask: AskQuestions | None = None
) -> AnswerSet:
    """Ask every question and return the operator's answers."""
    active_ask = ask or io.ask
    answers = active_ask(build_questions(preferences))
    return AnswerSet.model_validate(dict(answers))


def confirm_installation(*, confirm: ConfirmChoice | None = None) -> bool:
    """Ask for the explicit go-ahead before anything is written."""
    active_confirm = confirm or io.confirm
    return active_confirm(PROCEED_MESSAGE, True)
