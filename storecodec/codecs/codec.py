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

from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar, final

from storecodec.serialization import Deserializer, SerializationError, Serializer
from storecodec.serialization.types import Buffer

T = TypeVar('T')


class Codec(ABC, Generic[T]):
    """ This class models how values of a type `T` are written to a Serializer and read back from a Deserializer.

    Codecs are stateless: an instance holds no mutable state and can be shared freely, including between threads.
    Every codec must satisfy the round-trip invariant, `deserialize(serialize(x))` produces a value equal to `x` for
    every `x` accepted by `check_value`.

    Subclasses implement `_check_value`, `_serialize` and `_deserialize`, the public methods are final and add the
    checks and error annotations that every codec shares.
    """

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    # XXX: subclasses must initialize this property
    _name: ClassVar[str]

    @property
    def name(self) -> str:
        """Short name of this codec, used for diagnostics and to look the codec up by name."""
        return self._name

    def __repr__(self) -> str:
        return f'<{type(self).__name__} {self.name}>'

    @final
    def check_value(self, value: T, /) -> None:
        """ Raise a TypeError if the value's type is not compatible, or a ValueError if it is out of the codec's domain.
        """
        self._check_value(value)

    @final
    def serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Serialize a value instance.

        Serialization includes calling check_value before anything is written, so calling check_value before calling
        serialize is not needed.
        """
        # XXX: subclasses must implement Codec._serialize, not Codec.serialize
        self._check_value(value)
        self._serialize(serializer, value)

    @final
    def deserialize(self, deserializer: Deserializer, /) -> T:
        """ Deserialize a value instance.

        Any SerializationError raised while reading is annotated with this codec's name, unless an inner codec already
        did it, so the innermost codec that failed is the one reported.
        """
        # XXX: subclasses must implement Codec._deserialize, not Codec.deserialize
        try:
            value = self._deserialize(deserializer)
        except SerializationError as e:
            if e.codec is None:
                e.codec = self.name
            raise
        # XXX: deserialization is expected to always produce valid values, this is only a double check
        self._check_value(value)
        return value

    @final
    def to_bytes(self, value: T, /) -> bytes:
        """ Shortcut to quickly convert a value T to `bytes` using a fresh in-memory serializer.
        """
        with Serializer.build_bytes_serializer() as serializer:
            self.serialize(serializer, value)
            return bytes(serializer.finalize())

    @final
    def from_bytes(self, data: Buffer, /) -> T:
        """ Shortcut to quickly parse a value T from `bytes`, trailing data is not allowed.
        """
        with Deserializer.build_bytes_deserializer(data) as deserializer:
            value = self.deserialize(deserializer)
            try:
                deserializer.finalize()
            except SerializationError as e:
                e.codec = self.name
                raise
            return value

    @abstractmethod
    def _check_value(self, value: T, /) -> None:
        """ Inner implementation of `Codec.check_value`."""
        raise NotImplementedError

    @abstractmethod
    def _serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Inner implementation of `serialize`, you can assume that the given value has been checked.

        Compound codecs should pass the inner `Codec.serialize` (not `Codec._serialize`) as an `Encoder`, that way
        inner values are checked too.
        """
        raise NotImplementedError

    @abstractmethod
    def _deserialize(self, deserializer: Deserializer, /) -> T:
        """ Inner implementation of `deserialize`, it is expected that deserializers always produce valid values."""
        raise NotImplementedError
