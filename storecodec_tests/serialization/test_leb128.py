import pytest

from storecodec.serialization import Deserializer, IntegerOverflowError, Serializer, TruncatedInputError
from storecodec.serialization.encoding.leb128 import decode_leb128, encode_leb128


def _do_round_trip_test_with_size(n: int, encoded_size: int, signed: bool) -> None:
    se = Serializer.build_bytes_serializer()
    encode_leb128(se, n, signed=signed)
    encoded_n = bytes(se.finalize())
    assert len(encoded_n) == encoded_size
    de = Deserializer.build_bytes_deserializer(encoded_n)
    assert decode_leb128(de, signed=signed) == n
    de.finalize()


EXAMPLES_SIGNED_BY_SIZE = {
    1: [0, 1, 2, 50, 63, -1, -2, -63, -64],
    2: [64, 65, 1000, 8191, -65, -66, -3000, -8192],
    3: [8192, 8193, 100000, 1048575, -8193, -100000, -1048576],
}


def gen_signed_test_cases():
    test_cases = []
    # convert example to test cases
    for size, examples in EXAMPLES_SIGNED_BY_SIZE.items():
        for example in examples:
            test_cases.append((example, size))
    # generate additional test cases
    for size in range(4, 11):
        n_pos_lo = (1 << (7 * (size - 1) - 1))
        n_pos_hi = (1 << (7 * size - 1)) - 1
        n_neg_lo = -(1 << (7 * size - 1))
        n_neg_hi = -(1 << (7 * (size - 1) - 1)) - 1
        test_cases.append((n_pos_lo, size))
        test_cases.append((n_pos_hi, size))
        test_cases.append((n_neg_lo, size))
        test_cases.append((n_neg_hi, size))
    return test_cases


@pytest.mark.parametrize('n, encoded_size', gen_signed_test_cases())
def test_signed_round_trip_with_size(n, encoded_size):
    _do_round_trip_test_with_size(n, encoded_size, True)


EXAMPLES_UNSIGNED_BY_SIZE = {
    1: [0, 1, 2, 63, 64, 126, 127],
    2: [128, 129, 300, 1000, 8192, 16383],
    3: [16384, 100000, 1048576, 2097151],
}


def gen_unsigned_test_cases():
    test_cases = []
    # convert example to test cases
    for size, examples in EXAMPLES_UNSIGNED_BY_SIZE.items():
        for example in examples:
            test_cases.append((example, size))
    # generate additional test cases
    for size in range(4, 11):
        n_lo = 1 << (7 * (size - 1))
        n_hi = (1 << (7 * size)) - 1
        test_cases.append((n_lo, size))
        test_cases.append((n_hi, size))
    return test_cases


@pytest.mark.parametrize('n, encoded_size', gen_unsigned_test_cases())
def test_unsigned_round_trip_with_size(n, encoded_size):
    _do_round_trip_test_with_size(n, encoded_size, False)


def test_packed_uint_size_is_minimal_and_non_decreasing():
    values = sorted({0, 1, 127, 128, 300, 16383, 16384, 2**21 - 1, 2**21, 2**32 - 1, 2**35, 2**56, 2**63, 2**64 - 1})
    sizes = []
    for n in values:
        se = Serializer.build_bytes_serializer()
        se.write_packed_uint(n)
        size = len(se.finalize())
        # the minimum number of 7-bit groups that can hold n
        assert size == max(1, -(-n.bit_length() // 7))
        sizes.append(size)
    assert sizes == sorted(sizes)


def test_packed_uint_300():
    se = Serializer.build_bytes_serializer()
    se.write_packed_uint(300)
    assert bytes(se.finalize()) == b'\xac\x02'


def test_packed_uint_rejects_invalid_values():
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        se.write_packed_uint(-1)
    with pytest.raises(ValueError):
        se.write_packed_uint(2**32, bits=32)
    with pytest.raises(ValueError):
        se.write_packed_int(2**31, bits=32)
    # nothing was written
    assert se.cur_pos() == 0


@pytest.mark.parametrize('data, bits, expected', [
    ('ffffffff0f', 32, 2**32 - 1),
    ('ffffffffffffffffff01', 64, 2**64 - 1),
    ('8000', 32, 0),  # padded encodings are accepted while they fit
])
def test_packed_uint_upper_bound(data, bits, expected):
    de = Deserializer.build_bytes_deserializer(bytes.fromhex(data))
    assert de.read_packed_uint(bits=bits) == expected
    de.finalize()


@pytest.mark.parametrize('data, bits', [
    ('ffffffff1f', 32),  # 33 bits
    ('ffffffffff01', 32),  # 6 groups
    ('ffffffffffffffffff02', 64),  # 65 bits
    ('8080808080808080808000', 64),  # 11 groups, even if the value is 0
])
def test_packed_uint_overflow(data, bits):
    de = Deserializer.build_bytes_deserializer(b'\x00' + bytes.fromhex(data))
    de.read_byte()
    with pytest.raises(IntegerOverflowError) as e:
        de.read_packed_uint(bits=bits)
    assert e.value.offset == 1
    # it is also a builtin OverflowError
    assert isinstance(e.value, OverflowError)


def test_packed_int_overflow():
    se = Serializer.build_bytes_serializer()
    se.write_packed_int(2**31, bits=64)
    de = Deserializer.build_bytes_deserializer(se.finalize())
    with pytest.raises(IntegerOverflowError):
        de.read_packed_int(bits=32)


@pytest.mark.parametrize('data', [b'', b'\x80', b'\xff\xff'])
def test_packed_uint_truncated(data):
    de = Deserializer.build_bytes_deserializer(data)
    with pytest.raises(TruncatedInputError) as e:
        de.read_packed_uint()
    assert e.value.offset == len(data)
