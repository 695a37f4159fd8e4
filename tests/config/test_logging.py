"""Tests for structlog configuration and the constraint log sink."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from vouch.config.logging import configure_logging, structlog_sink
from vouch.config.models import ValidationConfig
from vouch.constraints import positive


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    vouch_logger = logging.getLogger("vouch")
    vouch_level = vouch_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    vouch_logger.setLevel(vouch_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("vouch").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("vouch").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("vouch.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "vouch.test"
        assert "timestamp" in parsed

    def test_json_timestamp_is_utc(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("vouch.test").warning("utc")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["timestamp"].endswith("Z")

    def test_json_renders_objects_with_repr(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("vouch.test").warning("obj", input=object)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["input"] == repr(object)

    def test_stdlib_vouch_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("vouch.engine.schema").debug("Circular reference skipped")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Circular reference skipped"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "vouch.engine.schema"

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("urllib3").debug("noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1


class TestStructlogSink:
    def test_violation_logged(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        config = ValidationConfig(logger=structlog_sink())
        positive().validate(-1, config)
        lines = [json.loads(line) for line in capfd.readouterr().err.splitlines() if line]
        (parsed,) = [line for line in lines if line["event"] == "constraint_violated"]
        assert parsed["constraint_id"] == "vouch.number.positive"
        assert parsed["input"] == -1
        assert parsed["logger"] == "vouch.constraints"

    def test_satisfied_logged_at_debug(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        config = ValidationConfig(logger=structlog_sink())
        positive().validate(1, config)
        assert capfd.readouterr().err == ""
