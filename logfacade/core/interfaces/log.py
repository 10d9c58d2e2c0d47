"""
Log interface: the contract backends implement and callers log through.

The six enablement queries and six emission methods are the whole backend
contract. Everything else on ILog (the ``<level>0`` lazy forms, ``log`` and
``is_enabled``) is built on that contract and comes for free.

Levels, least to most serious: trace, debug, info, warn, error, fatal.
How they map onto the backend's own levels is up to the adapter, but the
adapter should keep that ordering.

Callers avoid building expensive messages for disabled levels either with
an explicit guard:

    if log.is_debug_enabled():
        log.debug(build_report())

or by letting the facade do the check:

    log.debug0(build_report)
    log.debug0("report for %s: %r", job_id, stats)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable

from ...lazy import emit, is_enabled, log0
from ..levels import Level


@runtime_checkable
class SupportsLog(Protocol):
    """Structural form of the minimal backend contract."""

    def is_trace_enabled(self) -> bool: ...

    def is_debug_enabled(self) -> bool: ...

    def is_info_enabled(self) -> bool: ...

    def is_warn_enabled(self) -> bool: ...

    def is_error_enabled(self) -> bool: ...

    def is_fatal_enabled(self) -> bool: ...

    def trace(self, message: Any, cause: BaseException | None = None) -> None: ...

    def debug(self, message: Any, cause: BaseException | None = None) -> None: ...

    def info(self, message: Any, cause: BaseException | None = None) -> None: ...

    def warn(self, message: Any, cause: BaseException | None = None) -> None: ...

    def error(self, message: Any, cause: BaseException | None = None) -> None: ...

    def fatal(self, message: Any, cause: BaseException | None = None) -> None: ...


class ILog(ABC):
    """
    Interface for severity-leveled logging.

    Subclasses implement the enablement queries and direct emission methods.
    Enablement queries must be cheap, side-effect free and must not raise;
    callers use them on hot paths.
    """

    # -------------------------------------------------------------------------
    # Enablement queries
    # -------------------------------------------------------------------------

    @abstractmethod
    def is_fatal_enabled(self) -> bool:
        """Is fatal logging currently enabled in the backend?"""
        pass

    @abstractmethod
    def is_error_enabled(self) -> bool:
        """Is error logging currently enabled in the backend?"""
        pass

    @abstractmethod
    def is_warn_enabled(self) -> bool:
        """Is warn logging currently enabled in the backend?"""
        pass

    @abstractmethod
    def is_info_enabled(self) -> bool:
        """Is info logging currently enabled in the backend?"""
        pass

    @abstractmethod
    def is_debug_enabled(self) -> bool:
        """Is debug logging currently enabled in the backend?"""
        pass

    @abstractmethod
    def is_trace_enabled(self) -> bool:
        """Is trace logging currently enabled in the backend?"""
        pass

    # -------------------------------------------------------------------------
    # Direct emission
    # -------------------------------------------------------------------------

    @abstractmethod
    def fatal(self, message: Any, cause: BaseException | None = None) -> None:
        """
        Log a message at fatal level.

        Args:
            message: Message object, rendered with ``str()`` by the backend
            cause: Optional exception to log alongside the message
        """
        pass

    @abstractmethod
    def error(self, message: Any, cause: BaseException | None = None) -> None:
        """Log a message, and optionally a cause, at error level."""
        pass

    @abstractmethod
    def warn(self, message: Any, cause: BaseException | None = None) -> None:
        """Log a message, and optionally a cause, at warn level."""
        pass

    @abstractmethod
    def info(self, message: Any, cause: BaseException | None = None) -> None:
        """Log a message, and optionally a cause, at info level."""
        pass

    @abstractmethod
    def debug(self, message: Any, cause: BaseException | None = None) -> None:
        """Log a message, and optionally a cause, at debug level."""
        pass

    @abstractmethod
    def trace(self, message: Any, cause: BaseException | None = None) -> None:
        """Log a message, and optionally a cause, at trace level."""
        pass

    # -------------------------------------------------------------------------
    # Level-generic helpers
    # -------------------------------------------------------------------------

    def is_enabled(self, level: Level) -> bool:
        """Enablement query for a level given as a Level value."""
        return is_enabled(self, level)

    def log(self, level: Level, message: Any, cause: BaseException | None = None) -> None:
        """Direct emission at a level given as a Level value."""
        emit(self, level, message, cause)

    # -------------------------------------------------------------------------
    # Lazy emission
    # -------------------------------------------------------------------------

    def trace0(self, message: Any, *args: Any, cause: BaseException | None = None) -> None:
        """
        Log at trace level only if trace is enabled.

        ``message`` is either a zero-argument producer, optionally followed
        by a cause, or a ``%`` format string followed by up to five
        arguments. Neither the producer nor the formatting runs when trace
        is disabled.

        Example:
            log.trace0(lambda: dump_state(conn))
            log.trace0(lambda: "retry failed", exc)
            log.trace0("sent %d bytes to %s", n, peer)
        """
        log0(self, Level.TRACE, message, *args, cause=cause)

    def debug0(self, message: Any, *args: Any, cause: BaseException | None = None) -> None:
        """Log at debug level only if debug is enabled (see trace0)."""
        log0(self, Level.DEBUG, message, *args, cause=cause)

    def info0(self, message: Any, *args: Any, cause: BaseException | None = None) -> None:
        """Log at info level only if info is enabled (see trace0)."""
        log0(self, Level.INFO, message, *args, cause=cause)

    def warn0(self, message: Any, *args: Any, cause: BaseException | None = None) -> None:
        """Log at warn level only if warn is enabled (see trace0)."""
        log0(self, Level.WARN, message, *args, cause=cause)

    def error0(self, message: Any, *args: Any, cause: BaseException | None = None) -> None:
        """Log at error level only if error is enabled (see trace0)."""
        log0(self, Level.ERROR, message, *args, cause=cause)

    def fatal0(self, message: Any, *args: Any, cause: BaseException | None = None) -> None:
        """Log at fatal level only if fatal is enabled (see trace0)."""
        log0(self, Level.FATAL, message, *args, cause=cause)
