"""mqconfig: Connection, publish and subscribe options for broker clients.

Connection configurators share names with submodules (``context``,
``codec``, ``log``), so import them from :mod:`mqconfig.options`.
"""

from mqconfig.codec import MsgpackCodec, PydanticCodec
from mqconfig.context import Context
from mqconfig.errors import ConfigurationError
from mqconfig.log import NOP_LOGGER, Logger, NopLogger, StdLogger
from mqconfig.middleware import recoverer
from mqconfig.options import Option, Options, new_options
from mqconfig.publish import (
    PublishOption,
    PublishOptions,
    new_publish_options,
    publish_context,
    publish_context_with_value,
)
from mqconfig.strategy import (
    STRATEGY_DO_ONCE,
    STRATEGY_RETRY,
    STRATEGY_SEND_BACK,
    Strategy,
    StrategyKind,
    same_strategy,
    strategy_from_name,
)
from mqconfig.subscribe import (
    SubscribeOption,
    SubscribeOptions,
    disable_auto_ack,
    new_subscribe_options,
    queue,
    subscribe_context,
    subscribe_context_with_value,
    subscribe_retry_num,
    subscribe_strategy,
)
from mqconfig.tracing import get_tracer
from mqconfig.types import Codec, Handler, Message, Middleware

__all__ = [
    # capabilities
    "Codec",
    "Handler",
    "Logger",
    "Message",
    "Middleware",
    "Strategy",
    # connection
    "Context",
    "Option",
    "Options",
    "new_options",
    # publish
    "PublishOption",
    "PublishOptions",
    "new_publish_options",
    "publish_context",
    "publish_context_with_value",
    # subscribe
    "SubscribeOption",
    "SubscribeOptions",
    "disable_auto_ack",
    "new_subscribe_options",
    "queue",
    "subscribe_context",
    "subscribe_context_with_value",
    "subscribe_retry_num",
    "subscribe_strategy",
    # strategies
    "STRATEGY_DO_ONCE",
    "STRATEGY_RETRY",
    "STRATEGY_SEND_BACK",
    "StrategyKind",
    "same_strategy",
    "strategy_from_name",
    # implementations
    "ConfigurationError",
    "MsgpackCodec",
    "NOP_LOGGER",
    "NopLogger",
    "PydanticCodec",
    "StdLogger",
    "get_tracer",
    "recoverer",
]
