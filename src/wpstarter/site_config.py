"""Rewrites the template's ``config.js`` with the collected answers.

The template file is treated as text: each recognised assignment is found by
a fixed pattern and replaced once. Values are inserted verbatim, so a value
containing a single quote produces invalid JavaScript; the template has no
structured configuration format to write instead.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from . import log
from .models import AnswerSet, StoredPreferences


@dataclass(frozen=True)
class StringAssignment:
    """A ``<target> = '<value>';`` line fed from one answer field."""

    target: str
    field: str

    @property
    def pattern(self) -> re.Pattern[str]:
        return re.compile(rf"{re.escape(self.target)} = '.*';")

    def render(self, value: str) -> str:
        return f"{self.target} = '{value}';"


STRING_ASSIGNMENTS: tuple[StringAssignment, ...] = (
    StringAssignment("config.site.title", "site_title"),
    StringAssignment("config.site.blogdescription", "blog_description"),
    StringAssignment("config.site.theme_name", "theme_name"),
    StringAssignment("config.database.dbname", "db_name"),
    StringAssignment("config.database.dbuser", "db_user"),
    StringAssignment("config.database.dbpass", "db_pass"),
    StringAssignment("config.database.dbhost", "db_host"),
    StringAssignment("config.site.admin_user", "admin_user"),
    StringAssignment("config.site.admin_password", "admin_password"),
    StringAssignment("config.site.admin_email", "admin_email"),
)

PLUGINS_TARGET = "config.plugins"
PLUGINS_PATTERN = re.compile(r"config\.plugins = \[.*?\];", re.DOTALL)


def render_plugin_list(slugs: list[str]) -> str:
    """Render the plugin assignment for the given slugs.

    Example:
        >>> render_plugin_list(["wordpress-seo", "jetpack"])
        "config.plugins = ['wordpress-seo','jetpack'];"
        >>> render_plugin_list([])
        'config.plugins = [];'
    """
    items = ",".join(f"'{slug}'" for slug in slugs)
    return f"{PLUGINS_TARGET} = [{items}];"


def _replace_first(pattern: re.Pattern[str], text: str, replacement: str) -> str:
    # A callable keeps backslashes in operator values literal.
    return pattern.sub(lambda _match: replacement, text, count=1)


def patch_config_text(
    text: str, answers: AnswerSet, preferences: StoredPreferences
) -> str:
    """Return ``text`` with every recognised assignment set from ``answers``.

    Assignments missing from ``text`` are left out; everything else is kept
    byte for byte.

    Example:
        >>> patch_config_text(
        ...     "config.database.dbname = '';",
        ...     AnswerSet(db_name="site1"),
        ...     StoredPreferences(),
        ... )
        "config.database.dbname = 'site1';"
    """
    patched = text
    for assignment in STRING_ASSIGNMENTS:
        value = getattr(answers, assignment.field)
        patched = _replace_first(assignment.pattern, patched, assignment.render(value))
    slugs = preferences.slugs_for(answers.plugins)
    return _replace_first(PLUGINS_PATTERN, patched, render_plugin_list(slugs))


def patch_config_file(
    path: Path, answers: AnswerSet, preferences: StoredPreferences
) -> bool:
    """Patch ``path`` in place when it exists.

    Returns:
        ``True`` when the file was rewritten, ``False`` when it is absent.
    """
    if not path.exists():
        log.debug(f"no site config at {path}; skipping substitution")
        return False
    with path.open("r", encoding="utf-8", newline="") as fh:
        contents = fh.read()
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(patch_config_text(contents, answers, preferences))
    log.debug(f"patched {path}")
    return True
