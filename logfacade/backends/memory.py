"""
In-memory ILog backend.

Keeps every record it is handed. Useful for asserting on log output in
tests, or for buffering messages before a real backend is configured.
"""

from typing import Any

from ..core.interfaces.log import ILog
from ..core.levels import Level
from ..core.models.record import LogRecord


class RecordingLog(ILog):
    """
    Threshold-based backend that stores LogRecords in a list.

    Like most backends, emission methods do not re-check the threshold:
    a direct ``debug()`` call is stored even when debug is disabled. Only
    the enablement queries, and therefore the lazy forms, honour it.
    """

    def __init__(self, level: str | int | Level = Level.TRACE) -> None:
        self._threshold = Level.parse(level)
        self._records: list[LogRecord] = []

    @property
    def level(self) -> Level:
        return self._threshold

    def set_level(self, level: str | int | Level) -> None:
        self._threshold = Level.parse(level)

    @property
    def records(self) -> list[LogRecord]:
        """Snapshot of the records received so far, oldest first."""
        return list(self._records)

    def messages(self, level: Level | None = None) -> list[Any]:
        """Messages received, optionally only those at ``level``."""
        return [r.message for r in self._records if level is None or r.level == level]

    def clear(self) -> None:
        self._records.clear()

    def _record(self, level: Level, message: Any, cause: BaseException | None) -> None:
        self._records.append(LogRecord(level=level, message=message, cause=cause))

    def is_fatal_enabled(self) -> bool:
        return Level.FATAL >= self._threshold

    def is_error_enabled(self) -> bool:
        return Level.ERROR >= self._threshold

    def is_warn_enabled(self) -> bool:
        return Level.WARN >= self._threshold

    def is_info_enabled(self) -> bool:
        return Level.INFO >= self._threshold

    def is_debug_enabled(self) -> bool:
        return Level.DEBUG >= self._threshold

    def is_trace_enabled(self) -> bool:
        return Level.TRACE >= self._threshold

    def fatal(self, message: Any, cause: BaseException | None = None) -> None:
        self._record(Level.FATAL, message, cause)

    def error(self, message: Any, cause: BaseException | None = None) -> None:
        self._record(Level.ERROR, message, cause)

    def warn(self, message: Any, cause: BaseException | None = None) -> None:
        self._record(Level.WARN, message, cause)

    def info(self, message: Any, cause: BaseException | None = None) -> None:
        self._record(Level.INFO, message, cause)

    def debug(self, message: Any, cause: BaseException | None = None) -> None:
        self._record(Level.DEBUG, message, cause)

    def trace(self, message: Any, cause: BaseException | None = None) -> None:
        self._record(Level.TRACE, message, cause)
