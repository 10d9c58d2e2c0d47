"""
Pydantic models for logfacade.

Exports:
    LogRecord: One emitted message as received by a backend
    LoggingConfig: Logging section of the settings
"""

from .base import ImmutableModel, LogFacadeBaseModel
from .config import ConfigBaseModel, LoggingConfig
from .record import LogRecord

__all__ = [
    "ConfigBaseModel",
    "ImmutableModel",
    "LogFacadeBaseModel",
    "LogRecord",
    "LoggingConfig",
]
