"""Build configurators from settings files.

Settings are validated with pydantic and turned into the same
configurators callers would write by hand, so file settings and code
compose with the usual last-write-wins order.

Example settings file::

    [connection]
    addresses = ["kafka-1:9093", "kafka-2:9093"]
    secure = true

    [connection.sasl]
    username = "orders"
    password = "secret"
    mechanism = "SCRAM-SHA-512"

    [subscriptions.orders]
    queue = "billing"
    retry_num = 3
    strategy = "retry"
"""

import ssl
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from aiokafka.helpers import create_ssl_context
from pydantic import BaseModel, ConfigDict, Field, field_validator

from mqconfig import options as opt
from mqconfig import subscribe as sub
from mqconfig.strategy import strategy_from_name


class TLSSettings(BaseModel):
    """Certificate files for secure transport."""

    model_config = ConfigDict(extra="forbid")

    cafile: str | None = None
    capath: str | None = None
    certfile: str | None = None
    keyfile: str | None = None
    password: str | None = None

    def ssl_context(self) -> ssl.SSLContext:
        return create_ssl_context(
            cafile=self.cafile,
            capath=self.capath,
            certfile=self.certfile,
            keyfile=self.keyfile,
            password=self.password,
        )


class SASLSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    username: str
    password: str
    mechanism: str = "PLAIN"


class ConnectionSettings(BaseModel):
    """The ``[connection]`` table."""

    model_config = ConfigDict(extra="forbid")

    addresses: list[str] = Field(default_factory=list)
    version: str = ""
    secure: bool = False
    otel: bool = False
    tls: TLSSettings | None = None
    sasl: SASLSettings | None = None

    def configurators(self) -> list[opt.Option]:
        configurators = [
            opt.addresses(*self.addresses),
            opt.version(self.version),
            opt.secure(self.secure),
            opt.otel(self.otel),
        ]
        if self.tls is not None:
            configurators.append(opt.tls_config(self.tls.ssl_context()))
        if self.sasl is not None:
            configurators.append(
                opt.sasl(self.sasl.username, self.sasl.password, self.sasl.mechanism)
            )
        return configurators


class SubscribeSettings(BaseModel):
    """A ``[subscriptions.<name>]`` table."""

    model_config = ConfigDict(extra="forbid")

    auto_ack: bool = True
    queue: str = ""
    retry_num: int = Field(default=0, ge=0)
    strategy: str | None = None

    @field_validator("strategy")
    @classmethod
    def _known_strategy(cls, value: str | None) -> str | None:
        if value is not None:
            strategy_from_name(value)
        return value

    def configurators(self) -> list[sub.SubscribeOption]:
        configurators = [
            sub.queue(self.queue),
            sub.subscribe_retry_num(self.retry_num),
        ]
        if not self.auto_ack:
            configurators.append(sub.disable_auto_ack())
        if self.strategy is not None:
            configurators.append(
                sub.subscribe_strategy(strategy_from_name(self.strategy))
            )
        return configurators


def connection_configurators(data: Mapping[str, Any]) -> list[opt.Option]:
    """Validate a ``[connection]`` mapping and return its configurators."""
    return ConnectionSettings.model_validate(data).configurators()


def subscribe_configurators(data: Mapping[str, Any]) -> list[sub.SubscribeOption]:
    """Validate a subscription mapping and return its configurators."""
    return SubscribeSettings.model_validate(data).configurators()


class SettingsDocument(BaseModel):
    """A whole settings file. Tables other than these are left alone."""

    connection: ConnectionSettings = Field(default_factory=ConnectionSettings)
    subscriptions: dict[str, SubscribeSettings] = Field(default_factory=dict)


def load_settings(path: str | Path) -> SettingsDocument:
    """Read and validate a TOML settings file."""
    with open(path, "rb") as f:
        data = tomllib.load(f)
    return SettingsDocument.model_validate(data)


def load_options(path: str | Path, *extra: opt.Option) -> opt.Options:
    """Build connection options from a TOML file.

    ``extra`` configurators run after the file's, so code can supply what
    files should not hold (codec, logger, error hook) or override them.
    """
    settings = load_settings(path)
    return opt.new_options(*settings.connection.configurators(), *extra)


def load_subscribe_options(
    path: str | Path,
    name: str,
    *extra: sub.SubscribeOption,
) -> sub.SubscribeOptions:
    """Build subscribe options from the ``[subscriptions.<name>]`` table.

    A missing table yields the defaults.
    """
    section = load_settings(path).subscriptions.get(name, SubscribeSettings())
    return sub.new_subscribe_options(*section.configurators(), *extra)
