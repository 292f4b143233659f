"""
Tests for runspine.core.logging.

Tests verify:
- JSON output carries ECS-style field names and service metadata
- DEBUG logs are suppressed at INFO level
- Bound context appears on records and is removed again
"""

from __future__ import annotations

import json

from runspine.core.logging import (
    LogContext,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


def _records(captured: str) -> list[dict]:
    return [json.loads(line) for line in captured.splitlines() if line.strip()]


class TestConfigureLogging:
    def teardown_method(self):
        clear_context()

    def test_json_output(self, capsys):
        configure_logging(level="INFO", json_format=True, service="test-service")
        get_logger("test").info("run_spec.built", net="bridge")

        [record] = _records(capsys.readouterr().err)
        assert record["event"] == "run_spec.built"
        assert record["net"] == "bridge"
        assert record["service.name"] == "test-service"
        assert record["log.level"] == "info"
        assert "@timestamp" in record

    def test_debug_suppressed_at_info(self, capsys):
        configure_logging(level="INFO", json_format=True)
        get_logger("test").debug("hidden")
        assert capsys.readouterr().err == ""

    def test_without_timestamp(self, capsys):
        configure_logging(level="INFO", json_format=True, add_timestamp=False)
        get_logger("test").warning("no_time")
        [record] = _records(capsys.readouterr().err)
        assert "@timestamp" not in record

    def test_console_output(self, capsys):
        configure_logging(level="INFO", json_format=False)
        get_logger("test").info("console_event")
        assert "console_event" in capsys.readouterr().err


class TestContext:
    def teardown_method(self):
        clear_context()

    def test_bind_context(self, capsys):
        configure_logging(level="INFO", json_format=True)
        bind_context(source="run.toml")
        get_logger("test").info("with_context")
        [record] = _records(capsys.readouterr().err)
        assert record["source"] == "run.toml"

    def test_log_context_unbinds(self, capsys):
        configure_logging(level="INFO", json_format=True)
        logger = get_logger("test")
        with LogContext(image="app:latest"):
            logger.info("inside")
        logger.info("outside")
        inside, outside = _records(capsys.readouterr().err)
        assert inside["image"] == "app:latest"
        assert "image" not in outside
