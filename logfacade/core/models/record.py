"""
Log record model.

A record is the (level, message, cause) triple handed to a backend. The
facade builds none of these itself; backends that keep what they were
given, such as the in-memory RecordingLog, store them.
"""

from __future__ import annotations

from typing import Any

from ..levels import Level
from .base import ImmutableModel


class LogRecord(ImmutableModel):
    """One emitted message as received by a backend."""

    level: Level
    message: Any
    cause: BaseException | None = None

    @property
    def text(self) -> str:
        """Message rendered the way a text backend would render it."""
        return str(self.message)
