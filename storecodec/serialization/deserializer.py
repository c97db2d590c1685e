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

import struct
from abc import ABC, abstractmethod
from types import TracebackType
from typing import TYPE_CHECKING, Any, Iterator, Optional, overload

from typing_extensions import Self

from .consts import DEFAULT_PACKED_INT_BITS
from .exceptions import InvalidEncodingError
from .types import Buffer

if TYPE_CHECKING:
    from .adapters import MaxBytesDeserializer
    from .bytes_deserializer import BytesDeserializer


class Deserializer(ABC):
    """A byte source: a read cursor over a bounded sequence of bytes.

    Implementations provide the raw reads and the cursor introspection (`remaining`, `cur_pos`), every typed read is
    built on top of them. Reads never return partial values: when there isn't enough data a `TruncatedInputError` is
    raised and whatever was consumed by the failed call must be considered lost.
    """

    def finalize(self) -> None:
        """Check that all bytes were consumed, the deserializer cannot be used after this."""
        if not self.is_empty():
            raise InvalidEncodingError('trailing data', offset=self.cur_pos())
        self.close()

    def close(self) -> None:
        """Release any resource held by this deserializer, the default implementation holds nothing."""

    @staticmethod
    def build_bytes_deserializer(data: Buffer) -> BytesDeserializer:
        from .bytes_deserializer import BytesDeserializer
        return BytesDeserializer(data)

    @abstractmethod
    def cur_pos(self) -> int:
        """Number of bytes consumed so far."""
        raise NotImplementedError

    @abstractmethod
    def remaining(self) -> int:
        """Number of bytes that can still be read."""
        raise NotImplementedError

    def is_empty(self) -> bool:
        return self.remaining() == 0

    @abstractmethod
    def peek_byte(self) -> int:
        """Read a single byte but don't consume from buffer."""
        raise NotImplementedError

    @abstractmethod
    def peek_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        """Read n single byte but don't consume from buffer."""
        raise NotImplementedError

    def peek_struct(self, format: str) -> tuple[Any, ...]:
        size = struct.calcsize(format)
        data = self.peek_bytes(size)
        return struct.unpack(format, data)

    @abstractmethod
    def read_byte(self) -> int:
        """Read a single byte as unsigned int."""
        raise NotImplementedError

    @abstractmethod
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        """Read n bytes, when exact=True it errors if there isn't enough data"""
        # XXX: this is a blanket implementation that is an example of the behavior, this implementation has to be
        #      explicitly used if needed
        def iter_bytes() -> Iterator[int]:
            for _ in range(n):
                if not exact and self.is_empty():
                    break
                yield self.read_byte()
        return bytes(iter_bytes())

    def read_all(self) -> Buffer:
        """Read all bytes until the reader is empty."""
        return self.read_bytes(self.remaining())

    def read_struct(self, format: str) -> tuple[Any, ...]:
        size = struct.calcsize(format)
        data = self.read_bytes(size)
        return struct.unpack_from(format, data)

    def read_fixed_int32(self) -> int:
        """Read a signed 32-bit integer from 4 big-endian bytes."""
        from .consts import INT32_BYTE_SIZE
        from .encoding.int import decode_int
        return decode_int(self, length=INT32_BYTE_SIZE, signed=True)

    def read_fixed_int64(self) -> int:
        """Read a signed 64-bit integer from 8 big-endian bytes."""
        from .consts import INT64_BYTE_SIZE
        from .encoding.int import decode_int
        return decode_int(self, length=INT64_BYTE_SIZE, signed=True)

    def read_utf8_text(self) -> str:
        """Read a string written by `Serializer.write_utf8_text`."""
        from .encoding.utf8 import decode_utf8
        return decode_utf8(self)

    def read_packed_uint(self, *, bits: int = DEFAULT_PACKED_INT_BITS) -> int:
        """Read an unsigned LEB128 value, raises IntegerOverflowError if it does not fit in `bits` bits."""
        from .encoding.leb128 import decode_leb128
        return decode_leb128(self, signed=False, bits=bits)

    def read_packed_int(self, *, bits: int = DEFAULT_PACKED_INT_BITS) -> int:
        """Read a signed LEB128 value, raises IntegerOverflowError if it does not fit in `bits` bits."""
        from .encoding.leb128 import decode_leb128
        return decode_leb128(self, signed=True, bits=bits)

    def with_max_bytes(self, max_bytes: int) -> MaxBytesDeserializer[Self]:
        """Helper method to wrap the current deserializer with MaxBytesDeserializer."""
        from .adapters import MaxBytesDeserializer
        return MaxBytesDeserializer(self, max_bytes)

    @overload
    def with_optional_max_bytes(self, max_bytes: None) -> Self:
        ...

    @overload
    def with_optional_max_bytes(self, max_bytes: int) -> MaxBytesDeserializer[Self]:
        ...

    def with_optional_max_bytes(self, max_bytes: int | None) -> Self | MaxBytesDeserializer[Self]:
        """Helper method to optionally wrap the current deserializer."""
        if max_bytes is None:
            return self
        return self.with_max_bytes(max_bytes)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()
