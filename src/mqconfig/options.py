"""Connection options for a broker client."""

import ssl
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any

from mqconfig.builder import Settings, build
from mqconfig.context import Context
from mqconfig.log import NOP_LOGGER, Logger
from mqconfig.types import Codec, Handler


@dataclass
class Options(Settings):
    """Everything a client needs to open and keep a broker session.

    Built once per client with :func:`new_options` and read-only after.
    Combinations are not checked here; the consuming client validates
    them when it connects.
    """

    addresses: tuple[str, ...] = ()
    """Broker addresses, in order."""

    version: str = ""
    """Broker protocol version token. Empty lets the client negotiate."""

    secure: bool = False
    """Use TLS. ``tls_config`` alone does not turn this on."""

    codec: Codec | None = None
    """Message codec. Required by the time a client consumes the options."""

    username: str = ""
    password: str = ""
    algorithm: str = ""
    """SASL mechanism, e.g. ``PLAIN`` or ``SCRAM-SHA-512``."""

    error_handler: Handler | None = None
    """Called when message processing fails. Unset means errors propagate."""

    tls_config: ssl.SSLContext | None = None
    """TLS material. Ignored unless ``secure`` is set."""

    context: Context | None = None
    """Implementation-specific values."""

    log: Logger = NOP_LOGGER

    otel: bool = False
    """Whether OpenTelemetry tracing is enabled."""


Option = Callable[[Options], None]


def new_options(*opts: Option) -> Options:
    """Build connection options from configurators, applied in order."""
    return build(Options(), opts)


def addresses(*addrs: str) -> Option:
    """Replace the broker address list."""

    def configure(o: Options) -> None:
        o.addresses = addrs

    return configure


def sasl(user: str, password: str, algorithm: str) -> Option:
    """Set SASL username, password and mechanism together."""

    def configure(o: Options) -> None:
        o.username = user
        o.password = password
        o.algorithm = algorithm

    return configure


def version(v: str) -> Option:
    def configure(o: Options) -> None:
        o.version = v

    return configure


def secure(b: bool) -> Option:
    """Toggle TLS for broker communication."""

    def configure(o: Options) -> None:
        o.secure = b

    return configure


def codec(c: Codec) -> Option:
    def configure(o: Options) -> None:
        o.codec = c

    return configure


def error_handler(h: Handler) -> Option:
    def configure(o: Options) -> None:
        o.error_handler = h

    return configure


def tls_config(t: ssl.SSLContext) -> Option:
    """Set TLS material. Pair with ``secure(True)`` to use it."""

    def configure(o: Options) -> None:
        o.tls_config = t

    return configure


def context(ctx: Context) -> Option:
    """Replace the carried context."""

    def configure(o: Options) -> None:
        o.context = ctx

    return configure


def context_with_value(key: Hashable, value: Any) -> Option:
    """Add one value to the carried context, starting from an empty one."""

    def configure(o: Options) -> None:
        base = o.context if o.context is not None else Context()
        o.context = base.with_value(key, value)

    return configure


def log(logger: Logger | None) -> Option:
    """Set the logger. ``None`` keeps whatever was set before."""

    def configure(o: Options) -> None:
        if logger is not None:
            o.log = logger

    return configure


def otel(b: bool) -> Option:
    def configure(o: Options) -> None:
        o.otel = b

    return configure
