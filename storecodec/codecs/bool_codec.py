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
from storecodec.serialization.encoding.bool import decode_bool, encode_bool


class BoolCodec(Codec[bool]):
    __slots__ = ()
    _name = 'bool'

    @override
    def _check_value(self, value: bool, /) -> None:
        if not isinstance(value, bool):
            raise TypeError('expected bool')

    @override
    def _serialize(self, serializer: Serializer, value: bool, /) -> None:
        encode_bool(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> bool:
        return decode_bool(deserializer)
