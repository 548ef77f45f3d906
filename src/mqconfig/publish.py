"""Per-call publish options."""

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any

from mqconfig.builder import Settings, build
from mqconfig.context import Context


@dataclass
class PublishOptions(Settings):
    """Options for a single publish call."""

    context: Context | None = None
    """Per-call values such as a deadline or trace parent."""


PublishOption = Callable[[PublishOptions], None]


def new_publish_options(*opts: PublishOption) -> PublishOptions:
    return build(PublishOptions(), opts)


def publish_context(ctx: Context) -> PublishOption:
    def configure(o: PublishOptions) -> None:
        o.context = ctx

    return configure


def publish_context_with_value(key: Hashable, value: Any) -> PublishOption:
    def configure(o: PublishOptions) -> None:
        base = o.context if o.context is not None else Context()
        o.context = base.with_value(key, value)

    return configure
