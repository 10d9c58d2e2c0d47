"""
Lazy and format-string emission helpers.

These work on any object that satisfies the minimal logging contract
(``is_<level>_enabled()`` plus ``<level>(message, cause=None)`` for each
of the six levels), so backend adapters only implement that contract and
callers still get the deferred forms:

    debug0(log, lambda: expensive_summary())
    debug0(log, "loaded %d rows from %s", count, path)

The producer, and for the format forms the ``%`` substitution together
with every ``str()`` of the arguments, run only when the level is enabled.
The enablement check and the emission are two separate backend calls.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from .core.exceptions import FormatArgumentError
from .core.levels import Level

if TYPE_CHECKING:
    from .core.interfaces.log import SupportsLog

Producer = Callable[[], object]

MAX_FORMAT_ARGS = 5

_ENABLED_QUERIES: dict[Level, str] = {level: f"is_{level.method_name}_enabled" for level in Level}


def is_enabled(log: SupportsLog, level: Level) -> bool:
    """Ask the backend whether ``level`` is currently enabled."""
    return getattr(log, _ENABLED_QUERIES[level])()


def emit(log: SupportsLog, level: Level, message: Any, cause: BaseException | None = None) -> None:
    """Forward a message to the backend's direct emission method, unguarded."""
    method = getattr(log, level.method_name)
    if cause is None:
        method(message)
    else:
        method(message, cause)


def log_lazy(
    log: SupportsLog,
    level: Level,
    producer: Producer,
    cause: BaseException | None = None,
) -> None:
    """
    Emit the producer's result at ``level`` if, and only if, it is enabled.

    The producer is called at most once, inline. Exceptions it raises
    propagate to the caller.
    """
    if not is_enabled(log, level):
        return
    emit(log, level, producer(), cause)


def format_producer(fmt: str, args: tuple[Any, ...]) -> Producer:
    """
    Build a producer applying printf-style ``%`` substitution on demand.

    A single non-empty mapping argument is used for ``%(name)s`` lookups,
    as the stdlib logging module does.
    """
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        mapping = args[0]

        def produce_mapping() -> str:
            return fmt % mapping

        return produce_mapping

    def produce() -> str:
        return fmt % args

    return produce


def log0(
    log: SupportsLog,
    level: Level,
    message: Any,
    *args: Any,
    cause: BaseException | None = None,
) -> None:
    """
    Lazy emission entry point shared by every ``<level>0`` helper.

    Call shapes:
        log0(log, level, producer)
        log0(log, level, producer, cause)
        log0(log, level, fmt, arg1[, ... arg5])
        log0(log, level, message)            # constant, no substitution

    ``cause`` may also be given by keyword for any shape.

    Raises:
        FormatArgumentError: On an unsupported argument shape, before the
            enablement check is made
    """
    if callable(message):
        if len(args) > 1:
            raise FormatArgumentError(
                "A producer accepts at most one extra positional argument (the cause)",
                argument_count=len(args),
            )
        if args:
            if cause is not None:
                raise FormatArgumentError("Cause given both positionally and by keyword")
            cause = args[0]
        log_lazy(log, level, message, cause)
        return

    if len(args) > MAX_FORMAT_ARGS:
        raise FormatArgumentError(
            f"At most {MAX_FORMAT_ARGS} format arguments are supported",
            argument_count=len(args),
        )
    if not args:
        constant = message
        log_lazy(log, level, lambda: constant, cause)
        return
    log_lazy(log, level, format_producer(message, args), cause)


def _level_helper(level: Level) -> Callable[..., None]:
    def helper(log: SupportsLog, message: Any, *args: Any, cause: BaseException | None = None) -> None:
        log0(log, level, message, *args, cause=cause)

    helper.__name__ = helper.__qualname__ = f"{level.method_name}0"
    helper.__doc__ = f"Lazy {level.method_name} emission; see :func:`log0` for the call shapes."
    return helper


trace0 = _level_helper(Level.TRACE)
debug0 = _level_helper(Level.DEBUG)
info0 = _level_helper(Level.INFO)
warn0 = _level_helper(Level.WARN)
error0 = _level_helper(Level.ERROR)
fatal0 = _level_helper(Level.FATAL)
