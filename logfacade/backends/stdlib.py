"""
ILog adapter over the stdlib logging module.

Enablement comes from ``Logger.isEnabledFor`` so it follows whatever level
the stdlib logger (or its ancestors) is configured with. Causes are passed
as ``exc_info`` and rendered as tracebacks by the stdlib formatter.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any

from ..core.interfaces.log import ILog
from ..core.levels import Level, register_trace_level
from ..core.models.config import LoggingConfig

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.normcase(os.path.abspath(__file__)))) + os.sep


def _caller_stacklevel() -> int:
    """stacklevel for Logger.log that skips every logfacade frame above the caller."""
    frame = sys._getframe(1)
    level = 1
    while frame is not None and os.path.normcase(frame.f_code.co_filename).startswith(_PACKAGE_DIR):
        frame = frame.f_back
        level += 1
    return level


class StdlibLog(ILog):
    """
    ILog implementation backed by a ``logging.Logger``.

    Wraps an existing logger as-is, or builds handlers for stderr and a
    rotating log file from a LoggingConfig.
    """

    def __init__(self, logger: logging.Logger | str = "logfacade") -> None:
        """
        Initialize the adapter.

        Args:
            logger: Logger instance, or the name passed to logging.getLogger
        """
        register_trace_level()
        self._logger = logger if isinstance(logger, logging.Logger) else logging.getLogger(logger)
        self._console_handler: logging.Handler | None = None
        self._file_handler: logging.Handler | None = None

    @classmethod
    def from_config(cls, config: LoggingConfig) -> "StdlibLog":
        """
        Build an adapter that owns its logger's handlers.

        Existing handlers on the named logger are closed and removed, and propagation to
        the root logger is turned off.
        """
        log = cls(config.name)
        log._configure(config)
        return log

    def _configure(self, config: LoggingConfig) -> None:
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()
        self._logger.propagate = False
        self._logger.setLevel(config.threshold)

        formatter = logging.Formatter(config.format, datefmt=config.datefmt)

        # Console handler (stderr)
        if config.console:
            console = logging.StreamHandler(sys.stderr)
            console.setFormatter(formatter)
            self._logger.addHandler(console)
            self._console_handler = console

        # File handler with rotation
        if config.file:
            self._setup_file_handler(config, formatter)

    def _setup_file_handler(self, config: LoggingConfig, formatter: logging.Formatter) -> None:
        """Set up rotating file handler."""
        config.file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        self._logger.addHandler(file_handler)
        self._file_handler = file_handler

    @property
    def logger(self) -> logging.Logger:
        """The wrapped stdlib logger."""
        return self._logger

    def set_level(self, level: str | int | Level) -> None:
        """Set the logger's threshold; handlers stay unfiltered."""
        self._logger.setLevel(Level.parse(level))

    def close(self) -> None:
        """Detach and close the handlers this adapter created."""
        for handler in (self._console_handler, self._file_handler):
            if handler is not None:
                self._logger.removeHandler(handler)
                handler.close()
        self._console_handler = None
        self._file_handler = None

    def _emit(self, level: Level, message: Any, cause: BaseException | None) -> None:
        # No args: the stdlib must not apply % substitution to the message again.
        # Caller info names the first frame outside logfacade, for direct and lazy calls alike.
        self._logger.log(int(level), message, exc_info=cause, stacklevel=_caller_stacklevel())

    def is_fatal_enabled(self) -> bool:
        return self._logger.isEnabledFor(Level.FATAL)

    def is_error_enabled(self) -> bool:
        return self._logger.isEnabledFor(Level.ERROR)

    def is_warn_enabled(self) -> bool:
        return self._logger.isEnabledFor(Level.WARN)

    def is_info_enabled(self) -> bool:
        return self._logger.isEnabledFor(Level.INFO)

    def is_debug_enabled(self) -> bool:
        return self._logger.isEnabledFor(Level.DEBUG)

    def is_trace_enabled(self) -> bool:
        return self._logger.isEnabledFor(Level.TRACE)

    def fatal(self, message: Any, cause: BaseException | None = None) -> None:
        self._emit(Level.FATAL, message, cause)

    def error(self, message: Any, cause: BaseException | None = None) -> None:
        self._emit(Level.ERROR, message, cause)

    def warn(self, message: Any, cause: BaseException | None = None) -> None:
        self._emit(Level.WARN, message, cause)

    def info(self, message: Any, cause: BaseException | None = None) -> None:
        self._emit(Level.INFO, message, cause)

    def debug(self, message: Any, cause: BaseException | None = None) -> None:
        self._emit(Level.DEBUG, message, cause)

    def trace(self, message: Any, cause: BaseException | None = None) -> None:
        self._emit(Level.TRACE, message, cause)
