import pytest

from storecodec.serialization import (
    AllocationError,
    Deserializer,
    InvalidEncodingError,
    Serializer,
    TruncatedInputError,
)
from storecodec.serialization.adapters import MaxBytesDeserializer, MaxBytesSerializer


def test_max_bytes_serializer() -> None:
    se = Serializer.build_bytes_serializer()
    limited = se.with_max_bytes(5)
    assert isinstance(limited, MaxBytesSerializer)
    limited.write_fixed_int32(1)
    limited.write_byte(2)
    with pytest.raises(AllocationError) as e:
        limited.write_byte(3)
    assert e.value.offset == 5
    # it is also a builtin MemoryError
    assert isinstance(e.value, MemoryError)
    assert bytes(se.finalize()) == b'\x00\x00\x00\x01\x02'


def test_max_bytes_serializer_bulk_write() -> None:
    se = Serializer.build_bytes_serializer().with_max_bytes(3)
    with pytest.raises(AllocationError):
        se.write_bytes(b'abcd')


def test_optional_max_bytes() -> None:
    se = Serializer.build_bytes_serializer()
    assert se.with_optional_max_bytes(None) is se
    de = Deserializer.build_bytes_deserializer(b'')
    assert de.with_optional_max_bytes(None) is de
    assert isinstance(de.with_optional_max_bytes(1), MaxBytesDeserializer)


def test_max_bytes_deserializer_window() -> None:
    de = Deserializer.build_bytes_deserializer(b'abcdef')
    window = de.with_max_bytes(4)
    assert window.remaining() == 4
    assert window.read_byte() == ord('a')
    assert window.remaining() == 3
    with pytest.raises(TruncatedInputError) as e:
        window.read_bytes(4)
    assert e.value.offset == 1
    assert bytes(window.read_all()) == b'bcd'
    assert window.is_empty()
    with pytest.raises(TruncatedInputError):
        window.read_byte()
    # the inner deserializer continues after the window
    assert bytes(de.read_all()) == b'ef'


def test_max_bytes_deserializer_shorter_input() -> None:
    de = Deserializer.build_bytes_deserializer(b'ab').with_max_bytes(10)
    assert de.remaining() == 2
    assert bytes(de.read_bytes(5, exact=False)) == b'ab'
    de.finalize()


def test_negative_max_bytes() -> None:
    with pytest.raises(ValueError):
        Serializer.build_bytes_serializer().with_max_bytes(-1)
    with pytest.raises(ValueError):
        Deserializer.build_bytes_deserializer(b'').with_max_bytes(-1)


def test_max_bytes_deserializer_finalize_consumed_window() -> None:
    de = Deserializer.build_bytes_deserializer(b'abcdef')
    window = de.with_max_bytes(4)
    assert bytes(window.read_bytes(4)) == b'abcd'
    # bytes after the window are not trailing data of the window
    window.finalize()
    assert bytes(de.read_all()) == b'ef'
    de.finalize()


def test_max_bytes_deserializer_finalize_partial_window() -> None:
    de = Deserializer.build_bytes_deserializer(b'abcdef')
    window = de.with_max_bytes(4)
    window.read_byte()
    with pytest.raises(InvalidEncodingError) as e:
        window.finalize()
    assert e.value.message == 'trailing data'
    assert e.value.offset == 1
