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
Ready-made codecs for primitive types.

Every instance here is stateless and can be shared freely, `get_codec` finds them by their short name.
"""

from storecodec.codecs.bool_codec import BoolCodec
from storecodec.codecs.bytes_codec import BytesCodec, BytesNoSizeCodec
from storecodec.codecs.codec import Codec
from storecodec.codecs.helpers import deserialize_from_bytes, serialize_to_bytes, serialize_to_bytes_nullable
from storecodec.codecs.int_codec import Int32Codec, Int64Codec
from storecodec.codecs.optional_codec import OptionalCodec
from storecodec.codecs.packed_int_codec import PackedInt32Codec, PackedInt64Codec
from storecodec.codecs.str_codec import Utf8Codec

# Codec for signed 32-bit integers
INTEGER = Int32Codec()

# Codec for signed 64-bit integers
LONG = Int64Codec()

# Codec for strings
STRING = Utf8Codec()

# Codec for byte buffers, adds a few extra bytes for the length
BYTE_ARRAY = BytesCodec()

# Codec for byte buffers without any size, only valid for the last value of a stream
BYTE_ARRAY_NOSIZE = BytesNoSizeCodec()

BOOLEAN = BoolCodec()
INTEGER_PACKED = PackedInt32Codec()
LONG_PACKED = PackedInt64Codec()

_CODECS_BY_NAME: dict[str, Codec] = {
    codec.name: codec
    for codec in [INTEGER, LONG, STRING, BYTE_ARRAY, BYTE_ARRAY_NOSIZE, BOOLEAN, INTEGER_PACKED, LONG_PACKED]
}


def get_codec_names() -> list[str]:
    """Names accepted by `get_codec`, optional variants are accepted as `optional_<name>`."""
    return list(_CODECS_BY_NAME)


def get_codec(name: str) -> Codec:
    """ Find a codec by its short name.

    >>> get_codec('int32')
    <Int32Codec int32>
    >>> get_codec('optional_utf8')
    <OptionalCodec optional_utf8>
    """
    prefix = 'optional_'
    if name.startswith(prefix):
        return OptionalCodec(get_codec(name[len(prefix):]))
    try:
        return _CODECS_BY_NAME[name]
    except KeyError:
        raise ValueError(f'unknown codec: {name}') from None


__all__ = [
    'Codec',
    'BoolCodec',
    'BytesCodec',
    'BytesNoSizeCodec',
    'Int32Codec',
    'Int64Codec',
    'OptionalCodec',
    'PackedInt32Codec',
    'PackedInt64Codec',
    'Utf8Codec',
    'INTEGER',
    'LONG',
    'STRING',
    'BYTE_ARRAY',
    'BYTE_ARRAY_NOSIZE',
    'BOOLEAN',
    'INTEGER_PACKED',
    'LONG_PACKED',
    'get_codec',
    'get_codec_names',
    'serialize_to_bytes',
    'serialize_to_bytes_nullable',
    'deserialize_from_bytes',
]
