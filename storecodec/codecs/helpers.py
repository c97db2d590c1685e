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
Free functions to convert single values to and from standalone byte sequences.

>>> from storecodec.codecs import INTEGER, STRING
>>> serialize_to_bytes(300, INTEGER).hex()
'0000012c'
>>> print(serialize_to_bytes_nullable(None, STRING))
None
>>> deserialize_from_bytes(bytes.fromhex('0000012c'), INTEGER)
300
"""

from typing import Optional, TypeVar

from storecodec.codecs.codec import Codec
from storecodec.serialization import Deserializer
from storecodec.serialization.types import Buffer

T = TypeVar('T')


def serialize_to_bytes(value: T, codec: Codec[T]) -> bytes:
    """Serialize `value` into a fresh in-memory serializer and return exactly the bytes that were written."""
    return codec.to_bytes(value)


def serialize_to_bytes_nullable(value: Optional[T], codec: Codec[T]) -> Optional[bytes]:
    """Same as `serialize_to_bytes` but `None` is returned as is, without touching the codec."""
    if value is None:
        return None
    return serialize_to_bytes(value, codec)


def deserialize_from_bytes(data: Buffer, codec: Codec[T], *, allow_trailing: bool = False) -> T:
    """Deserialize a single value from `data`.

    Trailing bytes after the value raise an InvalidEncodingError, unless `allow_trailing=True`.
    """
    if not allow_trailing:
        return codec.from_bytes(data)
    with Deserializer.build_bytes_deserializer(data) as deserializer:
        return codec.deserialize(deserializer)
