"""
Backend adapters implementing ILog.

- StdlibLog: stdlib ``logging`` adapter with console and rotating file output
- NullLog: discards everything
- RecordingLog: keeps records in memory
"""

from .memory import RecordingLog
from .null import NullLog
from .stdlib import StdlibLog

__all__ = [
    "NullLog",
    "RecordingLog",
    "StdlibLog",
]
