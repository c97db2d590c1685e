# Copyright 2026 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
This module implements LEB128 for signed and unsigned integers, it is the encoding used for "packed" integers.

LEB128 or Little Endian Base 128 is a variable-length code compression used to store arbitrarily large
integers in a small number of bytes. LEB128 is used in the DWARF debug file format and the WebAssembly
binary encoding for all integer literals.

References:
- https://en.wikipedia.org/wiki/LEB128
- https://dwarfstd.org/doc/DWARF5.pdf
- https://webassembly.github.io/spec/core/binary/values.html#integers

This module implements LEB128 encoding/decoding using the standard 1-byte block split into 1-bit for continuation and
7-bits for data. The least significant group comes first and every byte except the last has the continuation bit set,
so the encoding of a value always uses the minimum number of groups. The data can be either a signed or unsigned
integer, and an optional `bits` width bounds the accepted values on both directions.

>>> se = Serializer.build_bytes_serializer()
>>> se.write_bytes(b'test')  # writes 74657374
>>> encode_leb128(se, 0, signed=True)  # writes 00
>>> encode_leb128(se, 624485, signed=True)  # writes e58e26
>>> encode_leb128(se, -123456, signed=True)  # writes c0bb78
>>> encode_leb128(se, 300, signed=False)  # writes ac02
>>> bytes(se.finalize()).hex()
'7465737400e58e26c0bb78ac02'

>>> data = bytes.fromhex('00 e58e26 c0bb78 ac02 74657374')
>>> de = Deserializer.build_bytes_deserializer(data)
>>> decode_leb128(de, signed=True)  # reads 00
0
>>> decode_leb128(de, signed=True)  # reads e58e26
624485
>>> decode_leb128(de, signed=True)  # reads c0bb78
-123456
>>> decode_leb128(de, signed=False)  # reads ac02
300
>>> bytes(de.read_all())  # reads 74657374
b'test'
>>> de.finalize()
"""

from typing import Optional

from storecodec.serialization import Deserializer, Serializer
from storecodec.serialization.exceptions import IntegerOverflowError


def _bounds(*, signed: bool, bits: int) -> tuple[int, int]:
    """Inclusive range of values representable in `bits` bits."""
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


def max_leb128_size(bits: int) -> int:
    """ Maximum number of bytes used to encode a value of `bits` bits.

    >>> max_leb128_size(32)
    5
    >>> max_leb128_size(64)
    10
    """
    return -(-bits // 7)


def encode_leb128(serializer: Serializer, value: int, *, signed: bool, bits: Optional[int] = None) -> None:
    """ Encodes an integer using LEB128.

    Caller must explicitly choose `signed=True` or `signed=False`. When `bits` is given, values that do not fit in that
    many bits raise a ValueError.

    This module's docstring has more details on LEB128 and examples.
    """
    if not signed and value < 0:
        raise ValueError('cannot encode value <0 as unsigned')
    if bits is not None:
        lower, upper = _bounds(signed=signed, bits=bits)
        if not lower <= value <= upper:
            raise ValueError(f'value does not fit in {bits} bits')
    while True:
        byte = value & 0b0111_1111
        value >>= 7
        if signed:
            cont = (value == 0 and (byte & 0b0100_0000) == 0) or (value == -1 and (byte & 0b0100_0000) != 0)
        else:
            cont = value == 0
        if cont:
            serializer.write_byte(byte)
            break
        serializer.write_byte(byte | 0b1000_0000)


def decode_leb128(deserializer: Deserializer, *, signed: bool, bits: Optional[int] = None) -> int:
    """ Decodes a LEB128-encoded integer.

    Caller must explicitly choose `signed=True` or `signed=False`. When `bits` is given, an IntegerOverflowError is
    raised as soon as the chain of groups is longer than a `bits`-bit value can need, or when the decoded value does
    not fit in `bits` bits. A chain that runs past the end of the input raises TruncatedInputError.

    This module's docstring has more details on LEB128 and examples.
    """
    start_pos = deserializer.cur_pos()
    max_size = max_leb128_size(bits) if bits is not None else None
    result = 0
    shift = 0
    size = 0
    while True:
        byte = deserializer.read_byte()
        size += 1
        if max_size is not None and size > max_size:
            raise IntegerOverflowError(f'packed integer longer than {max_size} bytes', offset=start_pos)
        result |= (byte & 0b0111_1111) << shift
        shift += 7
        assert shift % 7 == 0
        if (byte & 0b1000_0000) == 0:
            break
    if signed and (byte & 0b0100_0000) != 0:
        result |= -(1 << shift)
    if bits is not None:
        lower, upper = _bounds(signed=signed, bits=bits)
        if not lower <= result <= upper:
            raise IntegerOverflowError(f'packed integer does not fit in {bits} bits', offset=start_pos)
    return result
