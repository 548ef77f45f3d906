"""Tests for codec implementations."""

import pytest
from pydantic import BaseModel

from mqconfig import Codec, MsgpackCodec, PydanticCodec

ORDER_ID = 42


class OrderPlaced(BaseModel):
    order_id: int
    sku: str


class TestPydanticCodec:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(PydanticCodec(), Codec)

    def test_marshal_basemodel(self) -> None:
        data = PydanticCodec().marshal(OrderPlaced(order_id=ORDER_ID, sku="A-1"))
        assert isinstance(data, bytes)
        assert b'"order_id":42' in data

    def test_unmarshal(self) -> None:
        result = PydanticCodec().unmarshal(b'{"order_id": 42, "sku": "A-1"}', OrderPlaced)
        assert result == OrderPlaced(order_id=ORDER_ID, sku="A-1")

    def test_marshal_non_basemodel_raises(self) -> None:
        with pytest.raises(TypeError, match="Expected BaseModel"):
            PydanticCodec().marshal({"order_id": ORDER_ID})

    def test_unmarshal_non_basemodel_raises(self) -> None:
        with pytest.raises(TypeError, match="Expected BaseModel subclass"):
            PydanticCodec().unmarshal(b"{}", dict)


class TestMsgpackCodec:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(MsgpackCodec(), Codec)

    def test_unmarshal_dict(self) -> None:
        codec = MsgpackCodec()
        data = codec.marshal({"order_id": ORDER_ID, "raw": b"\x00"})
        assert codec.unmarshal(data, dict) == {"order_id": ORDER_ID, "raw": b"\x00"}

    def test_type_mismatch_raises(self) -> None:
        codec = MsgpackCodec()
        with pytest.raises(TypeError, match="Expected dict, got list"):
            codec.unmarshal(codec.marshal([1, 2]), dict)
