"""
Unit tests for the in-memory and null backends and the ILog base class.
"""

import pytest

from logfacade.backends.memory import RecordingLog
from logfacade.backends.null import NullLog
from logfacade.core.interfaces.log import ILog, SupportsLog
from logfacade.core.levels import Level
from logfacade.core.models.record import LogRecord


class TestILog:
    """Tests for the ILog abstract base."""

    def test_incomplete_backend_cannot_be_instantiated(self):
        """A backend missing part of the contract is rejected."""

        class HalfLog(ILog):
            def is_info_enabled(self) -> bool:
                return True

            def info(self, message, cause=None) -> None:
                pass

        with pytest.raises(TypeError):
            HalfLog()  # type: ignore[abstract]

    def test_ilog_implementations_satisfy_protocol(self):
        assert isinstance(NullLog(), SupportsLog)
        assert isinstance(RecordingLog(), SupportsLog)

    def test_log_dispatches_by_level(self, recording_log):
        cause = OSError("disk")
        recording_log.log(Level.WARN, "low space", cause)

        assert recording_log.records == [LogRecord(level=Level.WARN, message="low space", cause=cause)]

    def test_is_enabled_dispatches_by_level(self, info_log):
        assert info_log.is_enabled(Level.INFO)
        assert not info_log.is_enabled(Level.DEBUG)


class TestRecordingLog:
    """Tests for RecordingLog."""

    def test_default_threshold_enables_everything(self):
        log = RecordingLog()
        assert log.level is Level.TRACE
        assert all(log.is_enabled(level) for level in Level)

    @pytest.mark.parametrize("threshold", list(Level))
    def test_threshold_is_monotone(self, threshold):
        log = RecordingLog(level=threshold)
        enabled = [level for level in Level if log.is_enabled(level)]
        assert enabled == [level for level in Level if level >= threshold]

    def test_direct_emission_not_filtered(self, info_log):
        """Direct calls are stored even for disabled levels."""
        info_log.debug("already built")
        assert info_log.messages(Level.DEBUG) == ["already built"]

    def test_records_snapshot(self, recording_log):
        recording_log.info("one")
        snapshot = recording_log.records
        recording_log.info("two")

        assert [r.message for r in snapshot] == ["one"]
        assert recording_log.messages() == ["one", "two"]

    def test_messages_filtered_by_level(self, recording_log):
        recording_log.info("i")
        recording_log.error("e")
        recording_log.fatal("f")

        assert recording_log.messages(Level.ERROR) == ["e"]

    def test_clear(self, recording_log):
        recording_log.trace("t")
        recording_log.clear()
        assert recording_log.records == []

    def test_set_level_accepts_names(self, recording_log):
        recording_log.set_level("warning")
        assert recording_log.level is Level.WARN
        assert not recording_log.is_info_enabled()
        assert recording_log.is_warn_enabled()

    def test_record_text(self, recording_log):
        recording_log.info(404)
        record = recording_log.records[0]
        assert record.message == 404
        assert record.text == "404"


class TestNullLog:
    """Tests for NullLog."""

    def test_every_level_disabled(self):
        log = NullLog()
        assert not any(log.is_enabled(level) for level in Level)

    def test_direct_emission_is_noop(self):
        log = NullLog()
        for level in Level:
            log.log(level, "ignored", ValueError("ignored"))
