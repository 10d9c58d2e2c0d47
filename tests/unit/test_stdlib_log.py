"""
Unit tests for the stdlib logging adapter.

Uses pytest's caplog for wrapped loggers and a temporary log file for
adapters built from configuration.
"""

import logging
import sys

import pytest

from logfacade import lazy
from logfacade.backends.stdlib import StdlibLog
from logfacade.core.levels import Level
from logfacade.core.models.config import LoggingConfig


@pytest.fixture
def stdlib_log(caplog) -> StdlibLog:
    """Adapter over a propagating logger captured by caplog at INFO."""
    caplog.set_level(logging.INFO, logger="tests.logfacade")
    return StdlibLog("tests.logfacade")


def read_log(path) -> str:
    return path.read_text(encoding="utf-8")


class TestEnablement:
    """Enablement follows the wrapped logger's effective level."""

    def test_threshold_info(self, stdlib_log):
        assert not stdlib_log.is_trace_enabled()
        assert not stdlib_log.is_debug_enabled()
        assert stdlib_log.is_info_enabled()
        assert stdlib_log.is_warn_enabled()
        assert stdlib_log.is_error_enabled()
        assert stdlib_log.is_fatal_enabled()

    def test_set_level(self, stdlib_log):
        stdlib_log.set_level("trace")
        assert stdlib_log.is_trace_enabled()

        stdlib_log.set_level(Level.ERROR)
        assert not stdlib_log.is_warn_enabled()
        assert stdlib_log.is_error_enabled()

    def test_wraps_existing_logger(self):
        logger = logging.getLogger("tests.logfacade.wrapped")
        log = StdlibLog(logger)
        assert log.logger is logger


class TestEmission:
    """Messages and causes reach the stdlib logger."""

    def test_levels_mapped(self, stdlib_log, caplog):
        stdlib_log.info("i")
        stdlib_log.warn("w")
        stdlib_log.error("e")
        stdlib_log.fatal("f")

        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
            (logging.INFO, "i"),
            (logging.WARNING, "w"),
            (logging.ERROR, "e"),
            (logging.CRITICAL, "f"),
        ]

    def test_trace_level_name(self, stdlib_log, caplog):
        stdlib_log.set_level("trace")
        caplog.set_level(Level.TRACE, logger="tests.logfacade")

        stdlib_log.trace("fine detail")

        assert caplog.records[-1].levelname == "TRACE"

    def test_percent_in_message_not_reformatted(self, stdlib_log, caplog):
        stdlib_log.info("progress 100%s done")
        assert caplog.records[-1].getMessage() == "progress 100%s done"

    def test_cause_becomes_exc_info(self, stdlib_log, caplog):
        try:
            raise ValueError("bad input")
        except ValueError as e:
            cause = e

        stdlib_log.error("request failed", cause)

        record = caplog.records[-1]
        assert record.exc_info[1] is cause
        assert "ValueError: bad input" in caplog.text

    def test_no_cause_no_exc_info(self, stdlib_log, caplog):
        stdlib_log.warn("plain")
        assert caplog.records[-1].exc_info is None

    def test_lazy_forms(self, stdlib_log, caplog):
        produced = []

        stdlib_log.debug0(lambda: produced.append("debug") or "debug")
        stdlib_log.info0("user=%s", "ada")

        assert produced == []
        assert [r.getMessage() for r in caplog.records] == ["user=ada"]

    def test_levelno_is_plain_int(self, stdlib_log, caplog):
        stdlib_log.warn("w")

        record = caplog.records[-1]
        assert type(record.levelno) is int
        assert logging.Formatter("%(levelno)s").format(record) == "30"


class TestCallerInfo:
    """Records name the application call site, not the adapter."""

    def test_direct_call_site(self, stdlib_log, caplog):
        stdlib_log.info("direct")

        record = caplog.records[-1]
        assert record.filename == "test_stdlib_log.py"
        assert record.funcName == "test_direct_call_site"

    def test_lazy_call_site(self, stdlib_log, caplog):
        stdlib_log.info0("lazy %s", 1)
        stdlib_log.info0(lambda: "producer")

        for record in caplog.records:
            assert record.filename == "test_stdlib_log.py"
            assert record.funcName == "test_lazy_call_site"

    def test_module_helper_call_site(self, stdlib_log, caplog):
        lazy.warn0(stdlib_log, "via %s", "module")

        record = caplog.records[-1]
        assert record.getMessage() == "via module"
        assert record.funcName == "test_module_helper_call_site"

    def test_line_number(self, stdlib_log, caplog):
        line = sys._getframe().f_lineno + 1
        stdlib_log.error("here")

        assert caplog.records[-1].lineno == line


class TestFromConfig:
    """Adapters built from LoggingConfig."""

    def test_file_output(self, tmp_path):
        log_file = tmp_path / "logs" / "app.log"
        config = LoggingConfig(
            name="tests.logfacade.file",
            level="debug",
            console=False,
            file=True,
            file_path=log_file,
        )
        log = StdlibLog.from_config(config)
        try:
            log.trace("hidden")
            log.debug("shown")
            log.error0(lambda: "failed", RuntimeError("root cause"))
        finally:
            log.close()

        content = read_log(log_file)
        assert "hidden" not in content
        assert "[DEBUG] tests.logfacade.file: shown" in content
        assert "[ERROR] tests.logfacade.file: failed" in content
        assert "RuntimeError: root cause" in content

    def test_handlers_replaced_and_not_propagating(self, tmp_path):
        config = LoggingConfig(
            name="tests.logfacade.handlers",
            console=True,
            file=True,
            file_path=tmp_path / "x.log",
        )
        first = StdlibLog.from_config(config)
        second = StdlibLog.from_config(config)
        try:
            assert len(second.logger.handlers) == 2
            assert second.logger.propagate is False
            assert second.logger.level == Level.INFO
        finally:
            first.close()
            second.close()

    def test_console_only(self):
        config = LoggingConfig(name="tests.logfacade.console", level="warn")
        log = StdlibLog.from_config(config)
        try:
            assert not log.is_info_enabled()
            assert len(log.logger.handlers) == 1
        finally:
            log.close()
        assert log.logger.handlers == []

    def test_close_is_idempotent(self):
        log = StdlibLog.from_config(LoggingConfig(name="tests.logfacade.close"))
        log.close()
        log.close()

    def test_reconfigure_closes_replaced_handlers(self, tmp_path):
        config = LoggingConfig(
            name="tests.logfacade.reconfigure",
            console=False,
            file=True,
            file_path=tmp_path / "app.log",
        )
        first = StdlibLog.from_config(config)
        first_handler = first.logger.handlers[0]
        assert first_handler.stream is not None

        second = StdlibLog.from_config(config)
        try:
            assert first_handler.stream is None
            assert first_handler not in second.logger.handlers
            second.info("still writing")
        finally:
            second.close()

        assert "still writing" in read_log(tmp_path / "app.log")
