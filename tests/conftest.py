# ruff: noqa: E402

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import wpstarter.io as io
import wpstarter.log as wpstarter_log


@pytest.fixture(autouse=True)
def _isolated_session(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("WPSTARTER_LOG_LEVEL", raising=False)
    monkeypatch.setattr(wpstarter_log, "_configured_level", None)
    monkeypatch.setattr(wpstarter_log, "_no_color_override", None)

    def fail_ask(questions: object) -> dict:
        raise AssertionError("prompted unexpectedly")

    def fail_confirm(text: str, default: bool = False) -> bool:
        raise AssertionError(f"confirmation requested unexpectedly: {text}")

    monkeypatch.setattr(io, "ask", fail_ask)
    monkeypatch.setattr(io, "confirm", fail_confirm)
