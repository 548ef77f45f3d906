"""Ordered application of configurators to a settings record."""

from collections.abc import Callable, Iterable
from dataclasses import FrozenInstanceError
from typing import Any, TypeVar

S = TypeVar("S", bound="Settings")


class Settings:
    """Base for option records.

    A record is writable while configurators run and read-only once
    :func:`build` seals it.
    """

    _sealed = False

    def __setattr__(self, name: str, value: Any) -> None:
        if self._sealed:
            msg = f"cannot assign to field {name!r}"
            raise FrozenInstanceError(msg)
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if self._sealed:
            msg = f"cannot delete field {name!r}"
            raise FrozenInstanceError(msg)
        super().__delattr__(name)


def build(record: S, configurators: Iterable[Callable[[S], None]]) -> S:
    """Apply configurators in order, then seal and return the record.

    Later configurators overwrite earlier ones touching the same field.
    No validation is performed here.
    """
    for configure in configurators:
        configure(record)
    object.__setattr__(record, "_sealed", True)
    return record
