"""Immutable context carried by option records."""

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime
from types import MappingProxyType
from typing import Any

from opentelemetry.context import Context as TraceContext


def _empty() -> Mapping[Hashable, Any]:
    return MappingProxyType({})


@dataclass(frozen=True)
class Context:
    """Out-of-band values threaded through option construction.

    Recognized values have their own slots. Anything else goes into
    ``values`` under a caller-chosen key. Looking up an absent key is
    not an error; it returns the default.

    Example:
        ctx = Context().with_value("tenant", "acme")
        ctx.value("tenant")  # "acme"
        ctx.value("missing")  # None
    """

    deadline: datetime | None = None
    """Point in time after which the operation should be abandoned."""

    trace: TraceContext | None = None
    """OpenTelemetry parent context for spans started by the client."""

    values: Mapping[Hashable, Any] = field(default_factory=_empty)
    """Caller extensions keyed by arbitrary hashable identifiers."""

    # values may hold unhashable objects
    __hash__ = None  # type: ignore[assignment]

    def with_value(self, key: Hashable, value: Any) -> "Context":
        """Return a new context with ``key`` bound to ``value``."""
        return replace(self, values=MappingProxyType({**self.values, key: value}))

    def with_deadline(self, deadline: datetime) -> "Context":
        return replace(self, deadline=deadline)

    def with_trace(self, trace: TraceContext) -> "Context":
        return replace(self, trace=trace)

    def value(self, key: Hashable, default: Any = None) -> Any:
        """Look up a caller extension, returning ``default`` when absent."""
        return self.values.get(key, default)
