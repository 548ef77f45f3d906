"""Translate finished options into aiokafka client arguments.

This is where option combinations are validated: the builder accepts
anything, and a Kafka client built from these arguments should fail
fast rather than at first use.

Example:
    options = new_options(addresses("broker:9092"), codec(PydanticCodec()))
    producer = AIOKafkaProducer(**producer_kwargs(options))
"""

import logging
from typing import Any

from aiokafka.helpers import create_ssl_context

from mqconfig.errors import ConfigurationError
from mqconfig.options import Options
from mqconfig.subscribe import SubscribeOptions

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "auto"


def validate_options(options: Options) -> None:
    """Check connection options before they reach a client."""
    if not options.addresses:
        msg = "At least one broker address is required"
        raise ConfigurationError(msg)

    if options.codec is None:
        msg = "A codec is required"
        raise ConfigurationError(msg)

    credentials = (options.username, options.password, options.algorithm)
    if any(credentials) and not all(credentials):
        msg = "SASL username, password and mechanism must be set together"
        raise ConfigurationError(msg)


def validate_subscribe_options(options: SubscribeOptions) -> None:
    """Check subscribe options before a subscription is registered."""
    if options.retry_num < 0:
        msg = f"Retry count must be non-negative, got {options.retry_num}"
        raise ConfigurationError(msg)

    if options.strategy is not None and not options.strategy.strategy():
        msg = "Strategy must report a non-empty identity"
        raise ConfigurationError(msg)


def security_protocol(options: Options) -> str:
    """Pick the Kafka security protocol for the options."""
    if options.secure:
        return "SASL_SSL" if options.username else "SSL"
    return "SASL_PLAINTEXT" if options.username else "PLAINTEXT"


def _common_kwargs(options: Options) -> dict[str, Any]:
    validate_options(options)

    kwargs: dict[str, Any] = {
        "bootstrap_servers": list(options.addresses),
        "api_version": options.version or DEFAULT_API_VERSION,
        "security_protocol": security_protocol(options),
    }

    if options.secure:
        # No TLS material means system defaults
        kwargs["ssl_context"] = options.tls_config or create_ssl_context()
    elif options.tls_config is not None:
        options.log.warn("TLS config is set but secure transport is disabled; ignoring")

    if options.username:
        kwargs["sasl_mechanism"] = options.algorithm
        kwargs["sasl_plain_username"] = options.username
        kwargs["sasl_plain_password"] = options.password

    logger.debug(
        "Kafka client for %s using %s",
        ",".join(options.addresses),
        kwargs["security_protocol"],
    )
    return kwargs


def producer_kwargs(options: Options) -> dict[str, Any]:
    """Keyword arguments for ``AIOKafkaProducer``.

    Raises:
        ConfigurationError: If the options are incomplete or inconsistent.
    """
    return _common_kwargs(options)


def consumer_kwargs(
    options: Options,
    subscribe_options: SubscribeOptions,
) -> dict[str, Any]:
    """Keyword arguments for ``AIOKafkaConsumer``.

    The queue group becomes the consumer group. An exclusive subscription
    (empty queue) gets no group. Auto-ack maps to auto-commit.

    Raises:
        ConfigurationError: If the options are incomplete or inconsistent.
    """
    validate_subscribe_options(subscribe_options)

    kwargs = _common_kwargs(options)
    kwargs["group_id"] = subscribe_options.queue or None
    kwargs["enable_auto_commit"] = subscribe_options.auto_ack
    return kwargs
