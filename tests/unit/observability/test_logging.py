"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging

import pytest
import structlog
from structlog.testing import capture_logs

from physical.config import InvalidSettingValueError
from physical.observability.logging import JsonLoggerFactory, get_logger


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestGetLogger:
    def test_initial_values_bound(self) -> None:
        with capture_logs() as logs:
            get_logger("physical.test", component="registry").info("health_check.registered")
        assert logs == [
            {"component": "registry", "event": "health_check.registered", "log_level": "info"}
        ]


class TestJsonLoggerFactory:
    def test_json_output(self, capsys: pytest.CaptureFixture[str], restore_logging) -> None:
        JsonLoggerFactory.configure(logging.INFO)
        get_logger("physical.test").info("health_check.completed", status=200)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "health_check.completed"
        assert event["status"] == 200
        assert event["level"] == "info"
        assert event["logger"] == "physical.test"
        assert "timestamp" in event

    def test_level_filters(self, capsys: pytest.CaptureFixture[str], restore_logging) -> None:
        JsonLoggerFactory.configure("warning")
        get_logger("physical.test").info("quiet")
        assert capsys.readouterr().err == ""

    def test_stdlib_records_rendered(self, capsys: pytest.CaptureFixture[str], restore_logging) -> None:
        JsonLoggerFactory.configure(logging.INFO)
        logging.getLogger("uvicorn.access").warning("GET /healthcheck 500")
        event = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert event["event"] == "GET /healthcheck 500"
        assert event["level"] == "warning"

    def test_unknown_level_name_rejected(self, restore_logging) -> None:
        root = logging.getLogger()
        handlers = list(root.handlers)
        with pytest.raises(InvalidSettingValueError) as info:
            JsonLoggerFactory.configure("chatty")
        assert info.value.setting_name == "log_level"
        assert root.handlers == handlers
