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


class _PackedIntCodec(Codec[int]):
    """ Base class for codecs of signed integers with a fixed width, encoded as signed LEB128.

    Values close to zero take fewer bytes, a 32-bit value takes at most 5 bytes and a 64-bit value at most 10.
    """

    __slots__ = ()
    # XXX: subclass must define this value:
    _bits: ClassVar[int]

    @override
    def _check_value(self, value: int, /) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError('expected integer')
        if value >= 2**(self._bits - 1):
            raise ValueError('above upper bound')
        if value < -(2**(self._bits - 1)):
            raise ValueError('below lower bound')

    @override
    def _serialize(self, serializer: Serializer, value: int, /) -> None:
        serializer.write_packed_int(value, bits=self._bits)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> int:
        return deserializer.read_packed_int(bits=self._bits)


class PackedInt32Codec(_PackedIntCodec):
    __slots__ = ()
    _name = 'packed_int32'
    _bits = 32


class PackedInt64Codec(_PackedIntCodec):
    __slots__ = ()
    _name = 'packed_int64'
    _bits = 64
