"""No-op ILog backend."""

from typing import Any

from ..core.interfaces.log import ILog


class NullLog(ILog):
    """Every level disabled, every emission discarded."""

    def is_fatal_enabled(self) -> bool:
        return False

    def is_error_enabled(self) -> bool:
        return False

    def is_warn_enabled(self) -> bool:
        return False

    def is_info_enabled(self) -> bool:
        return False

    def is_debug_enabled(self) -> bool:
        return False

    def is_trace_enabled(self) -> bool:
        return False

    def fatal(self, message: Any, cause: BaseException | None = None) -> None:
        """No-op."""
        pass

    def error(self, message: Any, cause: BaseException | None = None) -> None:
        """No-op."""
        pass

    def warn(self, message: Any, cause: BaseException | None = None) -> None:
        """No-op."""
        pass

    def info(self, message: Any, cause: BaseException | None = None) -> None:
        """No-op."""
        pass

    def debug(self, message: Any, cause: BaseException | None = None) -> None:
        """No-op."""
        pass

    def trace(self, message: Any, cause: BaseException | None = None) -> None:
        """No-op."""
        pass
