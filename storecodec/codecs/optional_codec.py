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

from typing import TypeVar

from typing_extensions import override

from storecodec.codecs.codec import Codec
from storecodec.serialization import Deserializer, Serializer
from storecodec.serialization.compound_encoding.optional import decode_optional, encode_optional

V = TypeVar('V')


class OptionalCodec(Codec[V | None]):
    """ Represents a value that is either `V` or `None`, with a 1-byte presence flag before the inner value.
    """

    __slots__ = ('_value',)

    _value: Codec[V]

    def __init__(self, codec: Codec[V]) -> None:
        self._value = codec

    @property
    def inner(self) -> Codec[V]:
        return self._value

    @property
    @override
    def name(self) -> str:
        return f'optional_{self._value.name}'

    @override
    def _check_value(self, value: V | None, /) -> None:
        if value is None:
            return
        self._value.check_value(value)

    @override
    def _serialize(self, serializer: Serializer, value: V | None, /) -> None:
        encode_optional(serializer, value, self._value.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> V | None:
        return decode_optional(deserializer, self._value.deserialize)
