"""Example Codec implementations.

The option layer only carries a codec reference. These cover common
payloads; brokers with their own formats supply their own codec.
"""

from typing import Any, TypeVar

import msgpack
from pydantic import BaseModel

T = TypeVar("T")


class PydanticCodec:
    """JSON codec for pydantic models."""

    def marshal(self, value: Any) -> bytes:
        if not isinstance(value, BaseModel):
            msg = f"Expected BaseModel, got {type(value).__name__}"
            raise TypeError(msg)
        return value.model_dump_json().encode()

    def unmarshal(self, data: bytes, target: type[T]) -> T:
        if not (isinstance(target, type) and issubclass(target, BaseModel)):
            msg = f"Expected BaseModel subclass, got {target!r}"
            raise TypeError(msg)
        return target.model_validate_json(data)  # type: ignore[return-value]


class MsgpackCodec:
    """msgpack codec for plain data (dicts, lists, scalars)."""

    def marshal(self, value: Any) -> bytes:
        return msgpack.packb(value, use_bin_type=True)

    def unmarshal(self, data: bytes, target: type[T]) -> T:
        value = msgpack.unpackb(data, raw=False)
        if not isinstance(value, target):
            msg = f"Expected {target.__name__}, got {type(value).__name__}"
            raise TypeError(msg)
        return value
