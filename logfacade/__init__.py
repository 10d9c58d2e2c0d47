"""
logfacade: a severity-leveled logging facade with lazy message construction.

Backends implement six enablement queries and six emission methods; callers
get direct, producer-based and printf-format emission on top:

    from logfacade import StdlibLog

    log = StdlibLog("myapp")
    log.info("started")
    log.debug0("state=%r", state)          # formatted only if debug is on
    log.error0(lambda: describe(job), exc)  # producer called only if error is on
"""

from .backends import NullLog, RecordingLog, StdlibLog
from .core import (
    FormatArgumentError,
    ILog,
    Level,
    LogFacadeException,
    LogFacadeSettings,
    SupportsLog,
    bootstrap,
    get_log,
    load_settings,
)
from .core.models import LogRecord
from .lazy import debug0, error0, fatal0, info0, log0, log_lazy, trace0, warn0

__version__ = "0.1.0"

__all__ = [
    "FormatArgumentError",
    "ILog",
    "Level",
    "LogFacadeException",
    "LogFacadeSettings",
    "LogRecord",
    "NullLog",
    "RecordingLog",
    "StdlibLog",
    "SupportsLog",
    "__version__",
    "bootstrap",
    "debug0",
    "error0",
    "fatal0",
    "get_log",
    "info0",
    "load_settings",
    "log0",
    "log_lazy",
    "trace0",
    "warn0",
]
