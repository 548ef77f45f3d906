"""Handler middleware driven by connection options."""

import logging

from mqconfig.context import Context
from mqconfig.options import Options
from mqconfig.types import Handler, Message, Middleware

logger = logging.getLogger(__name__)


def recoverer(options: Options) -> Middleware:
    """Route handler failures to the configured error hook.

    Failures are logged through ``options.log``. With an error hook set,
    the failing message is handed to it and the failure stops there.
    Without one, the exception propagates to the caller.

    Example:
        options = new_options(error_handler(dead_letter), log(StdLogger()))
        handle = recoverer(options)(handle_order)
    """
    log = options.log
    on_error = options.error_handler

    def middleware(next_handler: Handler) -> Handler:
        async def handler(ctx: Context, msg: Message) -> None:
            try:
                await next_handler(ctx, msg)
            except Exception as e:
                log.errorf("Handler failed for message on %s: %s", msg.topic, e)
                logger.debug("Handler traceback for %s", msg.topic, exc_info=True)
                if on_error is None:
                    raise
                await on_error(ctx, msg)

        return handler

    return middleware
