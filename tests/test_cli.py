import os
import sys
import tempfile
from pathlib import Path
from typing import Any
from unittest.mock import patch

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from typer.testing import CliRunner  # noqa: E402

import wpstarter.cli as cli  # noqa: E402
from tests.wpstarter.helpers import RecordingRunner  # noqa: E402

ANSWERS: dict[str, Any] = {
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
    "plugins": [],
    "save_config": False,
}


def _invoke(runner: RecordingRunner, args: list[str], *, proceed: bool = True):
    with (
        patch("wpstarter.exec.default_runner", return_value=runner),
        patch("wpstarter.io.ask", return_value=dict(ANSWERS)),
        patch("wpstarter.io.confirm", return_value=proceed),
    ):
        return CliRunner().invoke(cli.app, args)


def test_cli_scaffolds_default_target() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        runner = RecordingRunner()
        original_cwd = Path.cwd()
        os.chdir(root)
        try:
            result = _invoke(runner, [])
        finally:
            os.chdir(original_cwd)

        assert result.exit_code == 0, result.output
        target = root / "wpstarter"
        assert ("git", "clone", cli.paths.TEMPLATE_REPO_URL, str(target)) in runner.argvs
        assert "config.plugins = [];" in (target / "config.js").read_text(
            encoding="utf-8"
        )
        assert ">> cd wpstarter" in result.output


def test_cli_accepts_target_argument() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        runner = RecordingRunner()
        original_cwd = Path.cwd()
        os.chdir(root)
        try:
            result = _invoke(runner, ["blog"])
        finally:
            os.chdir(original_cwd)

        assert result.exit_code == 0, result.output
        assert (root / "blog" / "config.js").exists()
        assert not (root / "wpstarter").exists()


def test_cli_cancel_exits_zero() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        runner = RecordingRunner()
        original_cwd = Path.cwd()
        os.chdir(root)
        try:
            result = _invoke(runner, ["blog"], proceed=False)
        finally:
            os.chdir(original_cwd)

        assert result.exit_code == 0
        assert "Installation cancelled by the user." in result.output
        assert not (root / "blog").exists()


def test_cli_failure_exits_non_zero_and_cleans_up() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        runner = RecordingRunner(
            fail_when=lambda request: request.argv == ("npm", "run", "wpinstall")
        )
        original_cwd = Path.cwd()
        os.chdir(root)
        try:
            result = _invoke(runner, ["blog"])
        finally:
            os.chdir(original_cwd)

        assert result.exit_code == 1
        assert not (root / "blog").exists()


def test_cli_missing_dependency_exits_non_zero() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        runner = RecordingRunner(missing=("mysql",))
        original_cwd = Path.cwd()
        os.chdir(root)
        try:
            result = _invoke(runner, [])
        finally:
            os.chdir(original_cwd)

        assert result.exit_code == 1
        assert runner.argvs == [("mysql", "--version")]


def test_cli_help_describes_command() -> None:
    result = CliRunner().invoke(cli.app, ["--help"])

    assert result.exit_code == 0
    assert "WordPress" in result.output
    assert "TARGET" in result.output


def test_log_level_flag_sets_runtime_level() -> None:
    with (
        patch("wpstarter.cli.new_cmd.new_site", lambda _args: None),
        patch("wpstarter.cli.wpstarter_log.set_level") as mock_set_level,
    ):
        result = CliRunner().invoke(cli.app, ["--log-level", "DEBUG"])

    assert result.exit_code == 0
    mock_set_level.assert_called_once_with("debug")


def test_log_level_flag_rejects_unknown_values() -> None:
    result = CliRunner().invoke(cli.app, ["--log-level", "loud"], color=False)

    assert result.exit_code != 0
    assert "expected one of" in result.output.lower()


def test_no_color_flag_disables_colorized_output() -> None:
    with (
        patch("wpstarter.cli.new_cmd.new_site", lambda _args: None),
        patch("wpstarter.cli.wpstarter_log.set_no_color") as mock_set_no_color,
    ):
        result = CliRunner().invoke(cli.app, ["--no-color", "blog"])

    assert result.exit_code == 0
    mock_set_no_color.assert_called_once_with(True)


def test_log_level_flag_rejects_trace() -> None:
    with patch("wpstarter.cli.new_cmd.new_site", lambda _args: None):
        result = CliRunner().invoke(cli.app, ["--log-level", "trace"], color=False)

    assert result.exit_code == 2


def test_help_lists_only_console_options() -> None:
    result = CliRunner().invoke(cli.app, ["--help"], color=False)

    assert result.exit_code == 0
    assert "--log-level" in result.output
    assert "--no-color" in result.output
    assert "--install-completion" not in result.output
