"""
Core of logfacade.

This module provides:
- Level: the six ordered severity levels
- ILog / SupportsLog: the logging contract
- ServiceContainer and bootstrap: wiring of the configured backend
- Settings loading and the exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container, resolve, try_resolve
from .di import get_log, resolve_or_default
from .exceptions import (
    ConfigFileError,
    ConfigValidationError,
    FormatArgumentError,
    InvalidLevelError,
    LogFacadeConfigError,
    LogFacadeException,
    LogFacadeValidationError,
)
from .interfaces import ILog, SupportsLog
from .levels import Level
from .settings import LogFacadeSettings, load_settings

__all__ = [
    "ConfigFileError",
    "ConfigValidationError",
    "FormatArgumentError",
    "ILog",
    "InvalidLevelError",
    "Level",
    "LogFacadeConfigError",
    "LogFacadeException",
    "LogFacadeSettings",
    "LogFacadeValidationError",
    "ServiceContainer",
    "SupportsLog",
    "bootstrap",
    "get_container",
    "get_log",
    "is_initialized",
    "load_settings",
    "reset",
    "resolve",
    "resolve_or_default",
    "try_resolve",
]
