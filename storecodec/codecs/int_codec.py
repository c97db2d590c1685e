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

from typing import ClassVar

from typing_extensions import override

from storecodec.codecs.codec import Codec
from storecodec.serialization import Deserializer, Serializer
from storecodec.serialization.consts import INT32_BYTE_SIZE, INT64_BYTE_SIZE
from storecodec.serialization.encoding.int import decode_int, encode_int


class _SizedIntCodec(Codec[int]):
    """ Base class for codecs of builtin `int` values with a fixed size and signedness.
    """

    __slots__ = ()
    # XXX: subclass must define these values:
    _signed: ClassVar[bool]
    _byte_size: ClassVar[int]

    @classmethod
    def _upper_bound_value(cls) -> int:
        if cls._signed:
            return 2**(cls._byte_size * 8 - 1) - 1
        else:
            return 2**(cls._byte_size * 8) - 1

    @classmethod
    def _lower_bound_value(cls) -> int:
        if cls._signed:
            return -(2**(cls._byte_size * 8 - 1))
        else:
            return 0

    @override
    def _check_value(self, value: int, /) -> None:
        # XXX: bool is a subclass of int, but it has its own codec
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError('expected integer')
        if value > self._upper_bound_value():
            raise ValueError('above upper bound')
        if value < self._lower_bound_value():
            raise ValueError('below lower bound')

    @override
    def _serialize(self, serializer: Serializer, value: int, /) -> None:
        encode_int(serializer, value, length=self._byte_size, signed=self._signed)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> int:
        return decode_int(deserializer, length=self._byte_size, signed=self._signed)


class Int32Codec(_SizedIntCodec):
    """Signed 32-bit integer, always 4 bytes."""
    __slots__ = ()
    _name = 'int32'
    _signed = True
    _byte_size = INT32_BYTE_SIZE


class Int64Codec(_SizedIntCodec):
    """Signed 64-bit integer, always 8 bytes."""
    __slots__ = ()
    _name = 'int64'
    _signed = True
    _byte_size = INT64_BYTE_SIZE
