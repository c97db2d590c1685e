from unittest.mock import Mock

import pytest

from storecodec.codecs import (
    INTEGER,
    STRING,
    Codec,
    OptionalCodec,
    deserialize_from_bytes,
    serialize_to_bytes,
    serialize_to_bytes_nullable,
)
from storecodec.serialization import InvalidEncodingError, TruncatedInputError


def test_serialize_to_bytes() -> None:
    assert serialize_to_bytes(300, INTEGER) == b'\x00\x00\x01\x2c'
    assert serialize_to_bytes('', STRING) == b'\x00\x00\x00\x00'


def test_serialize_to_bytes_nullable() -> None:
    assert serialize_to_bytes_nullable(300, INTEGER) == b'\x00\x00\x01\x2c'

    codec = Mock(spec=Codec)
    assert serialize_to_bytes_nullable(None, codec) is None
    # the codec is never touched for an absent value
    assert codec.mock_calls == []


def test_nullable_differs_from_optional_codec() -> None:
    # an absent value produces no bytes at all, an optional codec writes a presence flag
    assert serialize_to_bytes_nullable(None, OptionalCodec(INTEGER)) is None
    assert serialize_to_bytes(None, OptionalCodec(INTEGER)) == b'\x00'


def test_deserialize_from_bytes() -> None:
    assert deserialize_from_bytes(b'\x00\x00\x01\x2c', INTEGER) == 300
    assert deserialize_from_bytes(bytearray(b'\x00\x00\x00\x02hi'), STRING) == 'hi'


def test_deserialize_from_bytes_trailing() -> None:
    data = b'\x00\x00\x01\x2c\xff\xff'
    with pytest.raises(InvalidEncodingError) as e:
        deserialize_from_bytes(data, INTEGER)
    assert e.value.offset == 4
    assert e.value.codec == 'int32'
    assert deserialize_from_bytes(data, INTEGER, allow_trailing=True) == 300


def test_deserialize_from_bytes_truncated() -> None:
    with pytest.raises(TruncatedInputError):
        deserialize_from_bytes(b'\x00\x00\x01', INTEGER, allow_trailing=True)
