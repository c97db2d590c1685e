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
This module implements encoding of integers with a fixed size, the size and signedness are parametrized.

The encoding format itself is a standard big-endian two's complement format, the length never depends on the value.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 300, length=4, signed=True)  # writes 0000012c
>>> encode_int(se, -1, length=4, signed=True)  # writes ffffffff
>>> encode_int(se, 2**63 - 1, length=8, signed=True)  # writes 7fffffffffffffff
>>> bytes(se.finalize()).hex()
'0000012cffffffff7fffffffffffffff'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000012cffffffff7fffffffffffffff'))
>>> decode_int(de, length=4, signed=True)  # reads 0000012c
300
>>> decode_int(de, length=4, signed=True)  # reads ffffffff
-1
>>> decode_int(de, length=8, signed=True)  # reads 7fffffffffffffff
9223372036854775807
>>> de.finalize()
"""

from storecodec.serialization import Deserializer, Serializer


def encode_int(serializer: Serializer, number: int, *, length: int, signed: bool) -> None:
    """ Encode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    try:
        data = int.to_bytes(number, length, byteorder='big', signed=signed)
    except OverflowError:
        raise ValueError('too big to encode')
    serializer.write_bytes(data)


def decode_int(deserializer: Deserializer, *, length: int, signed: bool) -> int:
    """ Decode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    data = deserializer.read_bytes(length)
    return int.from_bytes(data, byteorder='big', signed=signed)
