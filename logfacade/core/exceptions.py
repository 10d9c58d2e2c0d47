"""
Custom exception hierarchy for logfacade.

Logging calls themselves never raise facade exceptions: producer and backend
failures propagate as-is. These types cover configuration loading and
malformed calls to the lazy emission helpers.
"""

from __future__ import annotations


class LogFacadeException(Exception):
    """
    Base exception for all logfacade errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (file paths, values, etc.)
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class LogFacadeConfigError(LogFacadeException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(LogFacadeConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors and unreadable files when settings are
    loaded in strict mode.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(LogFacadeConfigError, ValueError):
    """Invalid or missing configuration value."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Validation Errors
# =============================================================================


class LogFacadeValidationError(LogFacadeException, ValueError):
    """Base class for input validation errors."""

    pass


class InvalidLevelError(LogFacadeValidationError):
    """A severity level name or number that does not map to a Level."""

    def __init__(
        self,
        message: str,
        *,
        value: object = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


class FormatArgumentError(LogFacadeException, TypeError):
    """
    A lazy emission call with an unsupported argument shape.

    Raised before any enablement check: too many format arguments, or
    a cause given both positionally and by keyword.
    """

    def __init__(
        self,
        message: str,
        *,
        argument_count: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if argument_count is not None:
            ctx["argument_count"] = argument_count
        super().__init__(message, context=ctx, cause=cause)
