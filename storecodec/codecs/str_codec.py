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


class Utf8Codec(Codec[str]):
    """ Represents builtin `str` values, encoded as UTF-8 with a 4-byte length prefix.
    """

    __slots__ = ()
    _name = 'utf8'

    @override
    def _check_value(self, value: str, /) -> None:
        if not isinstance(value, str):
            raise TypeError('expected str type')

    @override
    def _serialize(self, serializer: Serializer, value: str, /) -> None:
        serializer.write_utf8_text(value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> str:
        return deserializer.read_utf8_text()
