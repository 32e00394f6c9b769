# ruff: noqa: E402

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from wpstarter.exec import CommandRequest, CommandResult
from wpstarter.models import AnswerSet, StoredPreferences
from wpstarter.preferences import updated_preferences

SAMPLE_CONFIG_JS = """const config = {};
config.site = {};
config.database = {};

config.site.title = 'Website Title';
config.site.blogdescription = 'Just another WordPress site';
config.site.theme_name = 'WPStarter';
config.site.admin_user = '';
config.site.admin_password = '';
config.site.admin_email = '';

config.database.dbname = '';
config.database.dbuser = '';
config.database.dbpass = '';
config.database.dbhost = '';

config.plugins = [
    'wordpress-seo',
];

module.exports = config;
"""


def make_answers(**overrides: object) -> AnswerSet:
    data: dict[str, object] = {
        "site_title": "Acme Blog",
        "blog_description": "News from Acme",
        "theme_name": "AcmeTheme",
        "db_name": "acme",
        "db_user": "root",
        "db_pass": "secret",
        "db_host": "localhost",
        "admin_user": "admin",
        "admin_password": "hunter2",
        "admin_email": "admin@acme.test",
        "plugins": ["Yoast SEO"],
        "save_config": False,
    }
    data.update(overrides)
    return AnswerSet.model_validate(data)


class RecordingRunner:
    """Command runner fake that records requests instead of spawning them.

    ``git clone`` creates the destination directory (with ``config.js`` when
    ``template`` is given) so the pipeline sees a cloned tree.
    """

    def __init__(
        self,
        *,
        missing: tuple[str, ...] = (),
        fail_when: Callable[[CommandRequest], bool] | None = None,
        template: str | None = SAMPLE_CONFIG_JS,
    ) -> None:
        self.requests: list[CommandRequest] = []
        self._missing = set(missing)
        self._fail_when = fail_when
        self._template = template

    @property
    def argvs(self) -> list[tuple[str, ...]]:
        return [request.argv for request in self.requests]

    def run(self, request: CommandRequest) -> CommandResult | None:
        self.requests.append(request)
        if request.argv[0] in self._missing:
            return None
        if self._fail_when is not None and self._fail_when(request):
            return CommandResult(argv=request.argv, returncode=1)
        if request.argv[:2] == ("git", "clone"):
            destination = Path(request.argv[3])
            destination.mkdir(parents=True, exist_ok=True)
            (destination / "README.md").write_text("wpstarter\n", encoding="utf-8")
            if self._template is not None:
                (destination / "config.js").write_text(self._template, encoding="utf-8")
        return CommandResult(argv=request.argv, returncode=0)


class InMemoryPreferencesStore:
    """Preferences store fake that keeps saved records in memory."""

    def __init__(self, preferences: StoredPreferences | None = None) -> None:
        self.preferences = preferences or StoredPreferences()
        self.saved: list[StoredPreferences] = []

    def load(self) -> StoredPreferences:
        return self.preferences

    def save(
        self, answers: AnswerSet, previous: StoredPreferences
    ) -> StoredPreferences:
        updated = updated_preferences(answers, previous)
        self.saved.append(updated)
        self.preferences = updated
        return updated
