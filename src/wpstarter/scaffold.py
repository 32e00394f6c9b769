"""Scaffold pipeline: clone the template and provision the WordPress site.

Every step blocks on its external command and runs only after the previous
one finished. Any exception escaping the pipeline removes the whole target
directory before it propagates.
"""

from __future__ import annotations

import shutil
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from . import exec as exec_util
from . import log, paths, site_config
from .models import AnswerSet, StoredPreferences
from .preferences import PreferencesStore


@dataclass(frozen=True)
class CommandStep:
    """External command run as one visible progress step."""

    label: str
    done: str
    failed: str
    argv: tuple[str, ...]


INSTALL_TOOLING = CommandStep(
    label="Installing dependencies for the installer scripts...",
    done="Dependencies for the installer scripts installed successfully!",
    failed="Failed to install dependencies for the installer scripts.",
    argv=("npm", "install"),
)
INSTALL_PROJECT = CommandStep(
    label="Installing project dependencies...",
    done="Project dependencies installed successfully!",
    failed="Failed to install project dependencies.",
    argv=("npm", "install"),
)
INSTALL_WORDPRESS = CommandStep(
    label="Installing WordPress...",
    done="WordPress installed successfully!",
    failed="Failed to install WordPress.",
    argv=("npm", "run", "wpinstall"),
)


def clone_step(repo_url: str, target_dir: Path) -> CommandStep:
    return CommandStep(
        label="Cloning the repository...",
        done="Repository cloned successfully!",
        failed="Failed to clone the repository.",
        argv=("git", "clone", repo_url, str(target_dir)),
    )


@contextmanager
def removed_on_failure(target_dir: Path) -> Iterator[Path]:
    """Delete ``target_dir`` if the block raises, then re-raise.

    Removal is best effort; its outcome is not checked.
    """
    try:
        yield target_dir
    except Exception:
        log.warning("An error occurred during installation. Cleaning up...")
        shutil.rmtree(target_dir, ignore_errors=True)
        raise


class SiteScaffolder:
    """Runs the scaffold pipeline with injected collaborators."""

    def __init__(
        self,
        *,
        target_dir: Path,
        cwd: Path,
        store: PreferencesStore,
        runner: exec_util.CommandRunner | None = None,
        repo_url: str = paths.TEMPLATE_REPO_URL,
    ) -> None:
        self.target_dir = target_dir
        self.cwd = cwd
        self._store = store
        self._runner = runner
        self._repo_url = repo_url

    def _run_step(self, step: CommandStep, cwd: Path) -> None:
        with log.step(step.label, done=step.done, failed=step.failed):
            exec_util.run_checked(
                exec_util.CommandRequest(argv=step.argv, cwd=cwd),
                runner=self._runner,
            )

    def run(self, answers: AnswerSet, preferences: StoredPreferences) -> None:
        """Execute the whole pipeline.

        Raises:
            exec.CommandExecutionError: A step's command failed; the target
                directory has been removed.
        """
        with removed_on_failure(self.target_dir):
            self._run_step(clone_step(self._repo_url, self.target_dir), self.cwd)
            self._run_step(INSTALL_TOOLING, self.cwd)
            site_config.patch_config_file(
                paths.site_config_path(self.target_dir), answers, preferences
            )
            if answers.save_config:
                self._store.save(answers, preferences)
            self._run_step(INSTALL_PROJECT, self.target_dir)
            self._run_step(INSTALL_WORDPRESS, self.target_dir)
