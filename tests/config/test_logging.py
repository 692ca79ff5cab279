"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from katactl.config.logging import configure_logging, get_logger


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("katactl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("katactl").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("katactl.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "katactl.test"
        assert "timestamp" in parsed

    def test_debug_hidden_unless_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        get_logger("katactl.services.base").debug("input.rejected", op="area")
        assert capfd.readouterr().err == ""

    def test_service_debug_logged_when_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        from katactl.domain.shapes import Circle
        from katactl.services.area import AreaService

        configure_logging(verbose=True, log_json=True)
        AreaService().area(Circle(radius=-1))
        lines = [json.loads(line) for line in capfd.readouterr().err.splitlines() if line]
        rejected = [line for line in lines if line["event"] == "input.rejected"]
        assert rejected
        assert rejected[0]["field"] == "radius"

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
