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

r"""
This modules implements the two encodings of byte sequences.

The length-prefixed encoding prepends the length of the sequence encoded as a LEB128 unsigned integer, so it can appear
anywhere in a stream:

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'test')  # will prepend b'\x04' before writing b'test'
>>> bytes(se.finalize()).hex()
'0474657374'

>>> se = Serializer.build_bytes_serializer()
>>> raw_data = b'test' * 32
>>> len(raw_data)
128
>>> encode_bytes(se, raw_data)  # prepends b'\x80\x01' before raw_data
>>> encoded_data = bytes(se.finalize())
>>> len(encoded_data)
130
>>> encoded_data[:10].hex()
'80017465737474657374'

>>> de = Deserializer.build_bytes_deserializer(encoded_data)  # that we encoded before
>>> decoded_data = decode_bytes(de)
>>> de.finalize()  # called to assert we've consumed everything
>>> decoded_data == raw_data
True

>>> de = Deserializer.build_bytes_deserializer(b'\x04testfoo')
>>> _ = decode_bytes(de)
>>> try:
...     de.finalize()
... except ValueError as e:
...     print(*e.args)
trailing data

The length-implicit ("no size") encoding writes the raw bytes only, the decoder consumes everything that remains. It
can only be used for the last (or only) value of a stream:

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'foo')
>>> encode_bytes_nosize(se, b'test')
>>> bytes(se.finalize()).hex()
'03666f6f74657374'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('03666f6f74657374'))
>>> decode_bytes(de)
b'foo'
>>> decode_bytes_nosize(de)
b'test'
>>> de.finalize()
"""

from storecodec.serialization import Deserializer, Serializer
from storecodec.serialization.consts import DEFAULT_PACKED_INT_BITS
from storecodec.serialization.types import Buffer

from .leb128 import decode_leb128, encode_leb128


def encode_bytes(serializer: Serializer, data: Buffer) -> None:
    """ Encodes a byte-sequence adding a length prefix.

    This modules's docstring has more details and examples.
    """
    view = memoryview(data)
    encode_leb128(serializer, view.nbytes, signed=False, bits=DEFAULT_PACKED_INT_BITS)
    serializer.hint_capacity(view.nbytes)
    serializer.write_bytes(view)


def decode_bytes(deserializer: Deserializer) -> bytes:
    """ Decodes a byte-sequence with a length prefix.

    This modules's docstring has more details and examples.
    """
    size = decode_leb128(deserializer, signed=False, bits=DEFAULT_PACKED_INT_BITS)
    return bytes(deserializer.read_bytes(size))


def encode_bytes_nosize(serializer: Serializer, data: Buffer) -> None:
    """ Encodes a byte-sequence without any length information.

    This modules's docstring has more details and examples.
    """
    view = memoryview(data)
    serializer.hint_capacity(view.nbytes)
    serializer.write_bytes(view)


def decode_bytes_nosize(deserializer: Deserializer) -> bytes:
    """ Decodes a byte-sequence by consuming all the remaining bytes.

    This modules's docstring has more details and examples.
    """
    return bytes(deserializer.read_bytes(deserializer.remaining()))
