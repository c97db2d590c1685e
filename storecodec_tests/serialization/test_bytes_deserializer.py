import pytest

from storecodec.serialization import Deserializer, InvalidEncodingError, TruncatedInputError


def test_reads_advance_the_cursor() -> None:
    data = b'\x01\x02\x03\x04\x05'
    de = Deserializer.build_bytes_deserializer(data)
    assert de.cur_pos() == 0
    assert de.remaining() == 5
    assert de.peek_byte() == 1
    assert bytes(de.peek_bytes(2)) == b'\x01\x02'
    assert de.remaining() == 5
    assert de.read_byte() == 1
    assert bytes(de.read_bytes(2)) == b'\x02\x03'
    assert de.cur_pos() == 3
    assert de.remaining() == 2
    assert bytes(de.read_all()) == b'\x04\x05'
    assert de.is_empty()
    assert de.cur_pos() == 5
    de.finalize()
    # the underlying buffer is untouched
    assert data == b'\x01\x02\x03\x04\x05'


def test_truncated_reads() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02')
    with pytest.raises(TruncatedInputError) as e:
        de.read_bytes(3)
    assert e.value.offset == 0
    # a failed exact read does not consume anything
    assert de.remaining() == 2
    assert bytes(de.read_bytes(3, exact=False)) == b'\x01\x02'
    with pytest.raises(TruncatedInputError) as e:
        de.read_byte()
    assert e.value.offset == 2
    with pytest.raises(TruncatedInputError):
        de.peek_byte()


def test_negative_read() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01')
    with pytest.raises(ValueError):
        de.read_bytes(-1)


def test_read_struct() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x04\x00\x05')
    assert de.peek_struct('!B') == (4,)
    assert de.read_struct('!BH') == (4, 5)


def test_trailing_data() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02')
    de.read_byte()
    with pytest.raises(InvalidEncodingError) as e:
        de.finalize()
    assert e.value.offset == 1
    assert str(e.value) == 'trailing data (offset=1)'


def test_accepts_any_buffer() -> None:
    for data in [b'abc', bytearray(b'abc'), memoryview(b'abc')]:
        de = Deserializer.build_bytes_deserializer(data)
        assert bytes(de.read_all()) == b'abc'
