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

"""Conversion between the text given/shown on the command line and the values accepted by each codec."""

from typing import Any

from storecodec.codecs import Codec, OptionalCodec

NULL_TEXT = 'null'

_INT_CODECS = {'int32', 'int64', 'packed_int32', 'packed_int64'}
_BYTES_CODECS = {'bytes', 'bytes_nosize'}
_TRUE_TEXTS = {'true', '1'}
_FALSE_TEXTS = {'false', '0'}


def parse_value(codec: Codec, text: str) -> Any:
    """ Parse a value for the given codec.

    Integers are given in decimal (or with a 0x/0o/0b prefix), booleans as true/false or 1/0 (in any case)
    and byte buffers in hex.

    >>> from storecodec.codecs import get_codec
    >>> parse_value(get_codec('int32'), '-300')
    -300
    >>> parse_value(get_codec('bytes'), '010203')
    b'\\x01\\x02\\x03'
    >>> print(parse_value(get_codec('optional_bool'), 'null'))
    None
    """
    if isinstance(codec, OptionalCodec):
        if text == NULL_TEXT:
            return None
        return parse_value(codec.inner, text)
    name = codec.name
    if name in _INT_CODECS:
        return int(text, 0)
    if name in _BYTES_CODECS:
        return bytes.fromhex(text)
    if name == 'bool':
        lowered = text.lower()
        if lowered in _TRUE_TEXTS:
            return True
        if lowered in _FALSE_TEXTS:
            return False
        raise ValueError(f'invalid boolean: {text}')
    if name == 'utf8':
        return text
    raise ValueError(f'codec {name} cannot be used from the command line')


def format_value(value: Any) -> str:
    """ Format a decoded value the same way `parse_value` expects it.

    >>> format_value(b'\\x01\\x02')
    '0102'
    >>> format_value(True)
    'true'
    """
    if value is None:
        return NULL_TEXT
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, bytes):
        return value.hex()
    return str(value)
