"""Capabilities supplied by the broker client and its callers."""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

from mqconfig.context import Context

T = TypeVar("T")


@runtime_checkable
class Message(Protocol):
    """A message as seen by handlers."""

    @property
    def topic(self) -> str: ...

    @property
    def payload(self) -> bytes: ...

    @property
    def metadata(self) -> Mapping[str, str]: ...


@runtime_checkable
class Codec(Protocol):
    """Encodes values to message payloads and back."""

    def marshal(self, value: Any) -> bytes:
        """Encode a value to bytes."""
        ...

    def unmarshal(self, data: bytes, target: type[T]) -> T:
        """Decode bytes to an instance of ``target``."""
        ...


Handler = Callable[[Context, Message], Awaitable[None]]
"""Processes a message. Also the shape of the connection error hook."""

Middleware = Callable[[Handler], Handler]
