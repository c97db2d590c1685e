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
This module implements utf-8 string encoding with a fixed-size length prefix.

The prefix is the byte-length of the UTF-8 data as a 4-byte big-endian unsigned integer (not a packed integer), followed
by the UTF-8 data itself. Any string that can be encoded as UTF-8 is accepted, strings with lone surrogates can't.

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, 'foobar')  # writes 00000006666f6f626172
>>> encode_utf8(se, 'héllo')  # writes 0000000668c3a96c6c6f
>>> encode_utf8(se, '😎')  # writes 00000004f09f988e
>>> bytes(se.finalize()).hex()
'00000006666f6f6261720000000668c3a96c6c6f00000004f09f988e'

>>> data = bytes.fromhex('00000006666f6f6261720000000668c3a96c6c6f00000004f09f988e')
>>> de = Deserializer.build_bytes_deserializer(data)
>>> decode_utf8(de)  # reads 00000006666f6f626172
'foobar'
>>> decode_utf8(de)  # reads 0000000668c3a96c6c6f
'héllo'
>>> decode_utf8(de)  # reads 00000004f09f988e
'😎'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00000002c328'))
>>> try:
...     decode_utf8(de)
... except ValueError as e:
...     print(*e.args)
invalid utf-8 data: invalid continuation byte
"""

from storecodec.serialization import Deserializer, Serializer
from storecodec.serialization.consts import UTF8_LENGTH_PREFIX_SIZE, UTF8_MAX_LENGTH
from storecodec.serialization.exceptions import InvalidEncodingError

from .int import decode_int, encode_int


def encode_utf8(serializer: Serializer, value: str) -> None:
    """ Encodes a string using UTF-8 and adding a length prefix.

    This modules's docstring has more details and examples.
    """
    assert isinstance(value, str)
    try:
        data = value.encode('utf-8')
    except UnicodeEncodeError as e:
        raise InvalidEncodingError(f'string cannot be encoded as utf-8: {e.reason}',
                                   offset=serializer.cur_pos()) from e
    if len(data) > UTF8_MAX_LENGTH:
        raise ValueError('string is too long to encode')
    encode_int(serializer, len(data), length=UTF8_LENGTH_PREFIX_SIZE, signed=False)
    serializer.hint_capacity(len(data))
    serializer.write_bytes(data)


def decode_utf8(deserializer: Deserializer) -> str:
    """ Decodes a UTF-8 string with a length prefix.

    This modules's docstring has more details and examples.
    """
    size = decode_int(deserializer, length=UTF8_LENGTH_PREFIX_SIZE, signed=False)
    data_pos = deserializer.cur_pos()
    data = deserializer.read_bytes(size)
    try:
        return str(data, 'utf-8')
    except UnicodeDecodeError as e:
        raise InvalidEncodingError(f'invalid utf-8 data: {e.reason}', offset=data_pos + e.start) from e
