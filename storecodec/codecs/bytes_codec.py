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

from __future__ import annotations

from typing_extensions import override

from storecodec.codecs.codec import Codec
from storecodec.serialization import Deserializer, Serializer
from storecodec.serialization.encoding.bytes import (
    decode_bytes,
    decode_bytes_nosize,
    encode_bytes,
    encode_bytes_nosize,
)
from storecodec.serialization.types import Buffer


class _BytesLikeCodec(Codec[bytes]):
    """ Base class for codecs that accept any bytes-like value and always produce `bytes`.
    """

    __slots__ = ()

    @override
    def _check_value(self, value: Buffer, /) -> None:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError('expected bytes-like instance')


class BytesCodec(_BytesLikeCodec):
    """ Byte buffers with their length as a packed integer prefix, can be used anywhere in a stream.
    """

    __slots__ = ()
    _name = 'bytes'

    @override
    def _serialize(self, serializer: Serializer, value: Buffer, /) -> None:
        encode_bytes(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> bytes:
        return decode_bytes(deserializer)


class BytesNoSizeCodec(_BytesLikeCodec):
    """ Byte buffers without any length information.

    Deserialization consumes everything that remains, so this codec is only valid for the last (or only) value of a
    stream, using it for a value in the middle of a stream would swallow the values after it.
    """

    __slots__ = ()
    _name = 'bytes_nosize'

    @override
    def _serialize(self, serializer: Serializer, value: Buffer, /) -> None:
        encode_bytes_nosize(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> bytes:
        return decode_bytes_nosize(deserializer)
