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
from typing import TYPE_CHECKING, Any, Optional, overload

from typing_extensions import Self

from .consts import DEFAULT_PACKED_INT_BITS
from .types import Buffer

if TYPE_CHECKING:
    from .adapters import MaxBytesSerializer
    from .bytes_serializer import BytesSerializer


class Serializer(ABC):
    """A byte sink: an append-only destination for encoded values.

    Implementations only have to provide the raw byte writes, every typed write is built on top of them. Instances
    are meant to be owned by a single caller for the duration of one serialization and can be used as a context
    manager so their buffers are released on every exit path.
    """

    def finalize(self) -> Buffer:
        """Get the resulting byte sequence, the serializer cannot be reused after this."""
        raise TypeError('this serializer does not support finalization')

    def close(self) -> None:
        """Release any resource held by this serializer, the default implementation holds nothing."""

    @abstractmethod
    def cur_pos(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def write_byte(self, data: int) -> None:
        """Write a single byte."""
        raise NotImplementedError

    @abstractmethod
    def write_bytes(self, data: Buffer) -> None:
        # XXX: it is recommended that implementors of Serializer specialize this implementation
        for byte in bytes(memoryview(data)):
            self.write_byte(byte)

    def hint_capacity(self, size: int) -> None:
        """Advise that about `size` bytes are going to be written next.

        This carries no correctness obligation, writing more or fewer bytes than hinted is fine.
        """
        if size < 0:
            raise ValueError('size hint cannot be negative')

    def write_struct(self, data: tuple[Any, ...], format: str) -> None:
        data_bytes = struct.pack(format, *data)
        self.write_bytes(data_bytes)

    def write_fixed_int32(self, value: int) -> None:
        """Write a signed 32-bit integer as 4 big-endian bytes."""
        from .consts import INT32_BYTE_SIZE
        from .encoding.int import encode_int
        encode_int(self, value, length=INT32_BYTE_SIZE, signed=True)

    def write_fixed_int64(self, value: int) -> None:
        """Write a signed 64-bit integer as 8 big-endian bytes."""
        from .consts import INT64_BYTE_SIZE
        from .encoding.int import encode_int
        encode_int(self, value, length=INT64_BYTE_SIZE, signed=True)

    def write_utf8_text(self, value: str) -> None:
        """Write a string as UTF-8 with a fixed-size length prefix, see `encoding.utf8`."""
        from .encoding.utf8 import encode_utf8
        encode_utf8(self, value)

    def write_packed_uint(self, value: int, *, bits: int = DEFAULT_PACKED_INT_BITS) -> None:
        """Write a non-negative integer that fits in `bits` bits as an unsigned LEB128 value."""
        from .encoding.leb128 import encode_leb128
        encode_leb128(self, value, signed=False, bits=bits)

    def write_packed_int(self, value: int, *, bits: int = DEFAULT_PACKED_INT_BITS) -> None:
        """Write an integer that fits in `bits` bits (two's complement) as a signed LEB128 value."""
        from .encoding.leb128 import encode_leb128
        encode_leb128(self, value, signed=True, bits=bits)

    def with_max_bytes(self, max_bytes: int) -> MaxBytesSerializer[Self]:
        """Helper method to wrap the current serializer with MaxBytesSerializer."""
        from .adapters import MaxBytesSerializer
        return MaxBytesSerializer(self, max_bytes)

    @overload
    def with_optional_max_bytes(self, max_bytes: None) -> Self:
        ...

    @overload
    def with_optional_max_bytes(self, max_bytes: int) -> MaxBytesSerializer[Self]:
        ...

    def with_optional_max_bytes(self, max_bytes: int | None) -> Self | MaxBytesSerializer[Self]:
        """Helper method to optionally wrap the current serializer."""
        if max_bytes is None:
            return self
        return self.with_max_bytes(max_bytes)

    @staticmethod
    def build_bytes_serializer() -> BytesSerializer:
        from .bytes_serializer import BytesSerializer
        return BytesSerializer()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()
