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
An optional value is encoded as a presence flag followed by the value when present.

Layout:

    [0x00] when None
    [0x01][value] when not None

>>> from storecodec.serialization.encoding.int import encode_int, decode_int
>>> encode_int32 = lambda se, value: encode_int(se, value, length=4, signed=True)
>>> decode_int32 = lambda de: decode_int(de, length=4, signed=True)
>>> se = Serializer.build_bytes_serializer()
>>> encode_optional(se, 300, encode_int32)
>>> bytes(se.finalize()).hex()
'010000012c'

>>> se = Serializer.build_bytes_serializer()
>>> encode_optional(se, None, encode_int32)
>>> bytes(se.finalize()).hex()
'00'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('010000012c'))
>>> decode_optional(de, decode_int32)
300
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00'))
>>> str(decode_optional(de, decode_int32))
'None'
>>> de.finalize()
"""

from typing import Optional, TypeVar

from storecodec.serialization import Deserializer, Serializer
from storecodec.serialization.encoding.bool import decode_bool, encode_bool

from . import Decoder, Encoder

T = TypeVar('T')


def encode_optional(serializer: Serializer, value: Optional[T], encoder: Encoder[T]) -> None:
    if value is None:
        encode_bool(serializer, False)
    else:
        encode_bool(serializer, True)
        encoder(serializer, value)


def decode_optional(deserializer: Deserializer, decoder: Decoder[T]) -> Optional[T]:
    has_value = decode_bool(deserializer)
    if has_value:
        return decoder(deserializer)
    else:
        return None
