"""
Application bootstrap for logfacade.

Registers the configured ILog backend in the DI container. Call once at
application startup; library code then obtains it with ``get_log()``.
"""

from __future__ import annotations

from pathlib import Path

from .container import ServiceContainer, get_container
from .interfaces.log import ILog
from .settings import LogFacadeSettings, load_settings

_initialized = False
_built_logs: list = []


def bootstrap(
    settings: LogFacadeSettings | None = None,
    *,
    config_path: Path | None = None,
    start_dir: str | None = None,
) -> ServiceContainer:
    """
    Bootstrap logfacade.

    Registers a StdlibLog built from the logging settings as the ILog
    singleton. The backend is created on first resolve.

    Args:
        settings: Pre-loaded settings; loaded from file/env when omitted
        config_path: Explicit config file, used only when settings is None
        start_dir: Config search start, used only when settings is None

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    if settings is None:
        settings = load_settings(config_path=config_path, start_dir=start_dir)

    _register_log(container, settings)

    _initialized = True

    if settings.config_error:
        container.resolve(ILog).warn0("Using default logging settings: %s", settings.config_error)
    return container


def _register_log(container: ServiceContainer, settings: LogFacadeSettings) -> None:
    from ..backends.stdlib import StdlibLog

    def create_log() -> ILog:
        log = StdlibLog.from_config(settings.logging)
        _built_logs.append(log)
        return log

    container.register_singleton(ILog, factory=create_log)  # type: ignore[type-abstract]


def reset() -> None:
    """
    Reset the application state.

    Closes the handlers of any backend bootstrap() built, so a later
    bootstrap() on the same logger name does not leave files open.
    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    while _built_logs:
        _built_logs.pop().close()
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    """Check if logfacade has been bootstrapped."""
    return _initialized
