import pytest

from storecodec.serialization import AllocationError, BytesSerializer, Serializer


def test_finalize_returns_exactly_what_was_written() -> None:
    se = Serializer.build_bytes_serializer()
    assert isinstance(se, BytesSerializer)
    se.hint_capacity(1024)
    se.write_byte(0x01)
    se.write_bytes(b'\x02\x03')
    se.write_struct((4, 5), '!BH')
    assert se.cur_pos() == 6
    assert bytes(se.finalize()) == b'\x01\x02\x03\x04\x00\x05'


def test_size_hint_is_advisory() -> None:
    se = Serializer.build_bytes_serializer()
    se.hint_capacity(10)
    se.write_bytes(b'abc')
    se.hint_capacity(0)
    se.write_bytes(b'defgh')
    assert bytes(se.finalize()) == b'abcdefgh'
    with pytest.raises(ValueError):
        Serializer.build_bytes_serializer().hint_capacity(-1)


def test_invalid_byte() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        se.write_byte(256)
    with pytest.raises(ValueError):
        se.write_byte(-1)
    assert se.cur_pos() == 0


def test_mutable_buffers_are_copied() -> None:
    se = Serializer.build_bytes_serializer()
    data = bytearray(b'abc')
    se.write_bytes(data)
    data[0] = ord('z')
    assert bytes(se.finalize()) == b'abc'


def test_cannot_reuse_after_finalize() -> None:
    se = Serializer.build_bytes_serializer()
    se.write_bytes(b'abc')
    se.finalize()
    with pytest.raises(TypeError):
        se.finalize()
    with pytest.raises(TypeError):
        se.write_byte(0)


def test_context_manager_releases_on_error() -> None:
    with pytest.raises(RuntimeError):
        with Serializer.build_bytes_serializer() as se:
            se.write_bytes(b'abc')
            raise RuntimeError('boom')
    with pytest.raises(TypeError):
        se.write_bytes(b'def')


def test_finalize_out_of_memory() -> None:
    se = Serializer.build_bytes_serializer()
    se.write_bytes(b'abc')

    def parts():
        yield memoryview(b'abc')
        raise MemoryError

    # joining the written parts is where the final buffer gets allocated
    se._parts = parts()  # type: ignore[assignment]
    with pytest.raises(AllocationError) as e:
        se.finalize()
    assert e.value.offset == se.cur_pos() == 3
    assert isinstance(e.value, MemoryError)
    assert type(e.value.__cause__) is MemoryError
