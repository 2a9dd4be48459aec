"""
Logging system tests
"""

import logging

import pytest

from romtrim.common.enums import LogLevel
from romtrim.infrastructure.logging import (
    RomTrimLogger,
    get_logger,
    log_execution_time,
    set_log_level,
)


def _console_handlers():
    return [
        handler
        for handler in logging.getLogger("romtrim").handlers
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler)
    ]


@pytest.mark.unit
class TestRomTrimLogger:
    """Logger hierarchy and console level"""

    def test_singleton(self):
        assert RomTrimLogger() is RomTrimLogger()

    def test_named_loggers_live_under_romtrim(self):
        logger = get_logger("orchestrator")
        assert logger.name == "romtrim.orchestrator"
        assert get_logger("orchestrator") is logger

    def test_console_handler_installed_once(self):
        RomTrimLogger()
        assert len(_console_handlers()) == 1

    def test_set_log_level(self):
        original = _console_handlers()[0].level
        try:
            set_log_level(LogLevel.DEBUG)
            assert _console_handlers()[0].level == logging.DEBUG
        finally:
            for handler in _console_handlers():
                handler.setLevel(original)


@pytest.mark.unit
class TestLogExecutionTime:
    """Timing decorator"""

    def test_returns_result_and_logs(self, caplog):
        @log_execution_time("tests")
        def double(value):
            return value * 2

        with caplog.at_level(logging.DEBUG, logger="romtrim"):
            assert double(21) == 42

        assert any("Performance: double took" in record.getMessage() for record in caplog.records)

    def test_reraises(self, caplog):
        @log_execution_time("tests")
        def explode():
            raise RuntimeError("boom")

        with caplog.at_level(logging.DEBUG, logger="romtrim"):
            with pytest.raises(RuntimeError):
                explode()

        assert any("explode (failed)" in record.getMessage() for record in caplog.records)
