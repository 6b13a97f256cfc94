# ============================================================================
# LOGGING & CONFIGURATION TESTS
# ============================================================================
# EPOCH: 1 - DEPLOYMENT PLANNING
# STATUS: Tests - Structured logging and defaults
# PURPOSE: Verify context propagation, formatters and env-driven defaults
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Logging & Configuration Tests

Run with:
    pytest tests/test_logging_config.py -v
"""

import json
import logging

import pytest

from core.config import Defaults, LoggingDefaults, PlannerDefaults, get_defaults, reset_defaults
from core.logging import (
    HumanFormatter,
    StructuredFormatter,
    configure_logging,
    get_current_context,
    get_logger,
    log_checkpoint,
    log_context,
)


@pytest.fixture(autouse=True)
def fresh_defaults():
    reset_defaults()
    yield
    reset_defaults()


def _record(message="Binding networks", extra=None):
    record = logging.LogRecord(
        name="planner.binding",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    if extra is not None:
        record.extra = extra
    return record


# ============================================================================
# CONTEXT
# ============================================================================

class TestLogContext:
    def test_empty_outside_context(self):
        assert get_current_context().to_dict() == {}

    def test_nested_contexts_inherit(self):
        with log_context(deployment="cf"):
            with log_context(job="router", instance="router/0"):
                assert get_current_context().to_dict() == {
                    "deployment": "cf",
                    "job": "router",
                    "instance": "router/0",
                }
            assert get_current_context().to_dict() == {"deployment": "cf"}

    def test_extra_merges(self):
        with log_context(extra={"attempt": 1}):
            with log_context(extra={"network": "default"}):
                assert get_current_context().extra == {"attempt": 1, "network": "default"}


# ============================================================================
# FORMATTERS
# ============================================================================

class TestStructuredFormatter:
    def test_json_with_context(self):
        with log_context(job="router"):
            output = json.loads(StructuredFormatter().format(_record(extra={"count": 2})))

        assert output["message"] == "Binding networks"
        assert output["level"] == "INFO"
        assert output["context"] == {"job": "router"}
        assert output["data"] == {"count": 2}
        assert output["source"]["line"] == 1

    def test_without_source(self):
        output = json.loads(StructuredFormatter(include_source=False).format(_record()))
        assert "source" not in output


class TestHumanFormatter:
    def test_context_inline(self):
        with log_context(deployment="cf", job="router"):
            output = HumanFormatter().format(_record())

        assert "[deployment=cf, job=router]" in output
        assert output.endswith("planner.binding [deployment=cf, job=router]: Binding networks")


class TestContextLogger:
    def test_context_attached_to_records(self, caplog):
        logger = get_logger("planner.test")

        with caplog.at_level(logging.INFO, logger="planner.test"):
            with log_context(job="router"):
                logger.info("Reserving", extra={"network": "default"})

        record = caplog.records[-1]
        assert record.extra == {"network": "default", "job": "router"}

    def test_checkpoint(self, caplog):
        with caplog.at_level(logging.INFO, logger="checkpoint"):
            with log_context(job="router"):
                log_checkpoint("networks_bound", {"reservations": 2})

        record = caplog.records[-1]
        assert record.getMessage() == "CHECKPOINT: networks_bound"
        assert record.extra["checkpoint"] == "networks_bound"
        assert record.extra["job"] == "router"
        assert record.extra["data"] == {"reservations": 2}


# ============================================================================
# DEFAULTS
# ============================================================================

class TestDefaults:
    def test_builtin_defaults(self):
        defaults = Defaults()
        assert defaults.planner == PlannerDefaults(default_lifecycle="service", property_separator=".")
        assert defaults.logging == LoggingDefaults(level="INFO", json_output=False)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_FORMAT", "JSON")
        monkeypatch.setenv("PLANNER_PROPERTY_SEPARATOR", "/")

        defaults = get_defaults()

        assert defaults.logging.level == "DEBUG"
        assert defaults.logging.json_output is True
        assert defaults.planner.property_separator == "/"

    def test_cached_until_reset(self, monkeypatch):
        first = get_defaults()
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        assert get_defaults() is first
        reset_defaults()
        assert get_defaults().logging.level == "ERROR"


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_json_output(self):
        configure_logging(level="DEBUG", json_output=True)

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)

    def test_defaults_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        reset_defaults()

        configure_logging()

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, HumanFormatter)
