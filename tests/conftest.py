"""
Shared pytest fixtures for logfacade tests.

- reset_container: clears the global DI container around every test
- recording_log: in-memory backend with every level enabled
"""

import pytest

from logfacade.backends.memory import RecordingLog
from logfacade.core.bootstrap import reset


@pytest.fixture(autouse=True)
def reset_container():
    """Start and finish every test with an empty, un-bootstrapped container."""
    reset()
    yield
    reset()


@pytest.fixture
def recording_log() -> RecordingLog:
    """In-memory backend with every level enabled."""
    return RecordingLog(level="trace")


@pytest.fixture
def info_log() -> RecordingLog:
    """In-memory backend with threshold info (trace and debug disabled)."""
    return RecordingLog(level="info")
