"""Failure-handling strategies a subscriber can declare.

This module only records intent. Retrying, requeueing and at-most-once
delivery are carried out by the message-processing pipeline that reads
the subscribe options.
"""

from enum import StrEnum
from typing import Protocol, runtime_checkable


@runtime_checkable
class Strategy(Protocol):
    """Anything that can report a strategy identity."""

    def strategy(self) -> str:
        """Return the identity string, e.g. ``"retry"``."""
        ...


class StrategyKind(StrEnum):
    """Built-in strategies."""

    RETRY = "retry"
    """Redeliver up to the subscription's retry count, then give up."""

    DO_ONCE = "do_once"
    """Deliver at most once; never redeliver on failure."""

    SEND_BACK = "send_back"
    """Requeue to the origin topic for later reprocessing."""

    def strategy(self) -> str:
        return self.value


STRATEGY_RETRY = StrategyKind.RETRY
STRATEGY_DO_ONCE = StrategyKind.DO_ONCE
STRATEGY_SEND_BACK = StrategyKind.SEND_BACK


def same_strategy(a: Strategy, b: Strategy) -> bool:
    """Compare two strategies by identity string."""
    return a.strategy() == b.strategy()


def strategy_from_name(name: str) -> StrategyKind:
    """Resolve a built-in strategy by its identity string."""
    try:
        return StrategyKind(name)
    except ValueError:
        known = ", ".join(kind.value for kind in StrategyKind)
        msg = f"Unknown strategy {name!r} (expected one of: {known})"
        raise ValueError(msg) from None
