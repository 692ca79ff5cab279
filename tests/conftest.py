"""Shared pytest fixtures for katactl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from katactl.config.settings import KataSettings
from katactl.services.telemetry import _current_span, disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty temp directory with no katactl env overrides.

    Keeps config discovery from picking up a katactl.toml outside the test.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("KATACTL_CONFIG", raising=False)
    monkeypatch.delenv("KATACTL_AREA__PRECISION", raising=False)
    monkeypatch.delenv("KATACTL_CAR__REFERENCE_YEAR", raising=False)


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None]:
    """Undo telemetry and logging changes made by ``--verbose`` CLI runs."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    kata = logging.getLogger("katactl")
    kata_level = kata.level
    yield
    disable_telemetry()
    _current_span.set(None)
    root.handlers = original_handlers
    root.setLevel(original_level)
    kata.setLevel(kata_level)


@pytest.fixture
def settings() -> KataSettings:
    """Default settings with no config file present."""
    return KataSettings.from_cli()
