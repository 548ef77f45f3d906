"""Per-subscription options."""

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any

from mqconfig.builder import Settings, build
from mqconfig.context import Context
from mqconfig.strategy import Strategy


@dataclass
class SubscribeOptions(Settings):
    """Options for one subscription, owned by it while it is active."""

    auto_ack: bool = True
    """Treat a message as delivered once the handler returns without error.

    When disabled, the handler is responsible for acknowledging.
    """

    queue: str = ""
    """Queue group name.

    Subscribers sharing a name split a topic's messages between them.
    Empty means an exclusive subscription.
    """

    retry_num: int = 0
    """How many times a failed message is retried. Zero disables retries."""

    strategy: Strategy | None = None
    """Failure-handling strategy, built-in or custom."""

    context: Context | None = None


SubscribeOption = Callable[[SubscribeOptions], None]


def new_subscribe_options(*opts: SubscribeOption) -> SubscribeOptions:
    """Build subscribe options. ``auto_ack`` starts out true."""
    return build(SubscribeOptions(auto_ack=True), opts)


def disable_auto_ack() -> SubscribeOption:
    """Require explicit acknowledgement of handled messages."""

    def configure(o: SubscribeOptions) -> None:
        o.auto_ack = False

    return configure


def queue(name: str) -> SubscribeOption:
    """Share messages with other subscribers in the named group."""

    def configure(o: SubscribeOptions) -> None:
        o.queue = name

    return configure


def subscribe_context(ctx: Context) -> SubscribeOption:
    def configure(o: SubscribeOptions) -> None:
        o.context = ctx

    return configure


def subscribe_context_with_value(key: Hashable, value: Any) -> SubscribeOption:
    def configure(o: SubscribeOptions) -> None:
        base = o.context if o.context is not None else Context()
        o.context = base.with_value(key, value)

    return configure


def subscribe_retry_num(v: int) -> SubscribeOption:
    """Set the retry count. Negative counts are rejected by the consuming client."""

    def configure(o: SubscribeOptions) -> None:
        o.retry_num = v

    return configure


def subscribe_strategy(v: Strategy) -> SubscribeOption:
    def configure(o: SubscribeOptions) -> None:
        o.strategy = v

    return configure
