"""
Dependency injection helpers for logfacade.

Lazy resolution patterns that fall back to a default implementation when
the container has not been bootstrapped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from .interfaces.log import ILog

T = TypeVar("T")


def resolve_or_default(
    interface: type[T],
    default_factory: Callable[[], T],
) -> T:
    """Resolve a service from the container or create a default.

    Args:
        interface: The interface/protocol type to resolve
        default_factory: Callable that creates the default implementation

    Returns:
        Resolved service instance or default

    Example:
        >>> from logfacade.backends.null import NullLog
        >>> from logfacade.core.interfaces.log import ILog
        >>> log = resolve_or_default(ILog, NullLog)
    """
    from .container import get_container

    instance = get_container().try_resolve(interface)
    if instance is not None:
        return instance
    return default_factory()


def get_log() -> ILog:
    """The bootstrapped ILog, or a NullLog when nothing is registered.

    Example:
        >>> log = get_log()
        >>> log.debug0("cache size %d", len(cache))
    """
    from ..backends.null import NullLog
    from .interfaces.log import ILog

    return resolve_or_default(ILog, NullLog)  # type: ignore[type-abstract]


class LazyService:
    """Descriptor for lazy service resolution.

    Defers resolution until first access, then caches the instance.

    Example:
        class Worker:
            log = LazyService(ILog, NullLog)
    """

    def __init__(
        self,
        interface: type[T],
        default_factory: Callable[[], T],
    ) -> None:
        self.interface = interface
        self.default_factory = default_factory
        self._instance: T | None = None
        self._resolved = False

    def __get__(self, obj: object, objtype: type | None = None) -> T:  # type: ignore[type-var]
        if not self._resolved:
            self._instance = resolve_or_default(
                self.interface,
                self.default_factory,
            )
            self._resolved = True
        return self._instance  # type: ignore[return-value]
