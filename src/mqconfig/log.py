"""Logger capability and its implementations."""

import logging
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Logger(Protocol):
    """Logging surface the broker client writes to.

    Plain variants join their arguments with spaces. Formatted variants
    take a ``%``-style format string.
    """

    def info(self, *args: Any) -> None: ...

    def warn(self, *args: Any) -> None: ...

    def error(self, *args: Any) -> None: ...

    def errorf(self, format: str, *args: Any) -> None: ...

    def infof(self, format: str, *args: Any) -> None: ...


class NopLogger:
    """Logger that discards everything."""

    def info(self, *args: Any) -> None:
        pass

    def warn(self, *args: Any) -> None:
        pass

    def error(self, *args: Any) -> None:
        pass

    def errorf(self, format: str, *args: Any) -> None:
        pass

    def infof(self, format: str, *args: Any) -> None:
        pass


NOP_LOGGER = NopLogger()


class StdLogger:
    """Adapts a :class:`logging.Logger` to the Logger capability.

    Example:
        options = new_options(log(StdLogger(logging.getLogger("orders"))))
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("mqconfig")

    def info(self, *args: Any) -> None:
        self._logger.info(_join(args))

    def warn(self, *args: Any) -> None:
        self._logger.warning(_join(args))

    def error(self, *args: Any) -> None:
        self._logger.error(_join(args))

    def errorf(self, format: str, *args: Any) -> None:
        self._logger.error(format, *args)

    def infof(self, format: str, *args: Any) -> None:
        self._logger.info(format, *args)


def _join(args: tuple[Any, ...]) -> str:
    return " ".join(str(arg) for arg in args)
