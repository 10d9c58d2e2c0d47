"""
Severity levels for logfacade.

Six ordered levels, numerically aligned with the stdlib ``logging`` module
so adapters can pass them straight through. TRACE has no stdlib
counterpart and sits below DEBUG.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Literal

from .exceptions import InvalidLevelError

LevelName = Literal["trace", "debug", "info", "warn", "error", "fatal"]

TRACE_LEVEL_NUM = 5

_ALIASES = {
    "warning": "warn",
    "critical": "fatal",
}


class Level(IntEnum):
    """Ordered severity level, TRACE least severe and FATAL most severe."""

    TRACE = TRACE_LEVEL_NUM
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR
    FATAL = logging.CRITICAL

    @property
    def method_name(self) -> LevelName:
        """Name of the per-level emission method, e.g. ``"warn"``."""
        return self.name.lower()  # type: ignore[return-value]

    @classmethod
    def parse(cls, value: str | int | Level) -> Level:
        """
        Convert a level name or number to a Level.

        Names are case-insensitive; ``warning`` and ``critical`` are accepted
        as aliases for WARN and FATAL.

        Raises:
            InvalidLevelError: If the value does not name a level
        """
        if isinstance(value, Level):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError as e:
                raise InvalidLevelError(f"Unknown log level: {value}", value=value) from e
        if isinstance(value, str):
            key = value.strip().lower()
            key = _ALIASES.get(key, key)
            try:
                return cls[key.upper()]
            except KeyError as e:
                raise InvalidLevelError(f"Unknown log level: {value!r}", value=value) from e
        raise InvalidLevelError(f"Unsupported log level type: {type(value).__name__}", value=value)


def register_trace_level() -> None:
    """Register the TRACE level name with the stdlib logging module."""
    if logging.getLevelName(TRACE_LEVEL_NUM) != "TRACE":
        logging.addLevelName(TRACE_LEVEL_NUM, "TRACE")
