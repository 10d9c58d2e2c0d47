"""
Protocol and interface definitions for logfacade.

ILog is the nominal interface adapters subclass; SupportsLog is the same
minimal contract as a structural protocol for objects that do not.
"""

from .log import ILog, SupportsLog

__all__ = [
    "ILog",
    "SupportsLog",
]
