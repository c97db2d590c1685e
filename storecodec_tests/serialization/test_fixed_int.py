import struct

import pytest

from storecodec.serialization import Deserializer, Serializer, TruncatedInputError

INT32_VALUES = [0, 1, -1, 300, -300, 2**31 - 1, -2**31]
INT64_VALUES = [0, 1, -1, 300, 2**31, -2**31 - 1, 2**63 - 1, -2**63]


@pytest.mark.parametrize('value', INT32_VALUES)
def test_int32_matches_struct(value: int) -> None:
    se = Serializer.build_bytes_serializer()
    se.write_fixed_int32(value)
    data = bytes(se.finalize())
    assert data == struct.pack('!i', value)
    de = Deserializer.build_bytes_deserializer(data)
    assert de.read_fixed_int32() == value
    de.finalize()


@pytest.mark.parametrize('value', INT64_VALUES)
def test_int64_matches_struct(value: int) -> None:
    se = Serializer.build_bytes_serializer()
    se.write_fixed_int64(value)
    data = bytes(se.finalize())
    assert data == struct.pack('!q', value)
    de = Deserializer.build_bytes_deserializer(data)
    assert de.read_fixed_int64() == value
    de.finalize()


def test_fixed_size_does_not_depend_on_magnitude() -> None:
    se = Serializer.build_bytes_serializer()
    se.write_fixed_int32(0)
    assert se.cur_pos() == 4
    se.write_fixed_int64(0)
    assert se.cur_pos() == 12


@pytest.mark.parametrize('value', [2**31, -2**31 - 1])
def test_int32_out_of_range(value: int) -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        se.write_fixed_int32(value)


def test_int64_out_of_range() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        se.write_fixed_int64(2**63)


def test_truncated_fixed_int() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x00\x00\x00\x01\x00\x00')
    assert de.read_fixed_int32() == 1
    with pytest.raises(TruncatedInputError) as e:
        de.read_fixed_int32()
    assert e.value.offset == 4
    with pytest.raises(TruncatedInputError):
        Deserializer.build_bytes_deserializer(b'\x00' * 7).read_fixed_int64()
