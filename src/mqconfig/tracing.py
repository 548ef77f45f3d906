"""OpenTelemetry hooks for the tracing flag."""

from opentelemetry import context as otel_context
from opentelemetry import trace
from opentelemetry.trace import Tracer, TracerProvider

from mqconfig.context import Context
from mqconfig.options import Option, Options

TRACER_NAME = "mqconfig"


def get_tracer(
    options: Options,
    tracer_provider: TracerProvider | None = None,
) -> Tracer:
    """Return the tracer a client should use for these options.

    Args:
        options: Connection options. Tracing is off unless ``otel`` is set.
        tracer_provider: OpenTelemetry TracerProvider. Uses global if not set.
    """
    if not options.otel:
        return trace.NoOpTracer()
    provider = tracer_provider or trace.get_tracer_provider()
    return provider.get_tracer(TRACER_NAME)


def current_trace_context() -> Option:
    """Carry the active OpenTelemetry context as the trace parent.

    The active context is captured when this is called, not when the
    options are built.
    """
    captured = otel_context.get_current()

    def configure(o: Options) -> None:
        base = o.context if o.context is not None else Context()
        o.context = base.with_trace(captured)

    return configure
