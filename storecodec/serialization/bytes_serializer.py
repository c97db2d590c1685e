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

from typing import Optional

from typing_extensions import override

from .exceptions import AllocationError
from .serializer import Serializer
from .types import Buffer


class BytesSerializer(Serializer):
    """Simple implementation of Serializer to write to memory.

    This implementation defers joining everything until finalize is called, before that every write is stored as a
    memoryview in a list. Capacity hints are ignored, there is nothing to pre-allocate in a list of parts.
    """

    def __init__(self) -> None:
        self._parts: Optional[list[memoryview]] = []
        self._pos: int = 0

    def _get_parts(self) -> list[memoryview]:
        if self._parts is None:
            raise TypeError('serializer was already finalized or closed')
        return self._parts

    @override
    def finalize(self) -> memoryview:
        parts = self._get_parts()
        try:
            result = memoryview(b''.join(parts))
        except MemoryError as e:
            raise AllocationError(f'cannot allocate {self._pos} bytes', offset=self._pos) from e
        self._parts = None
        return result

    @override
    def close(self) -> None:
        self._parts = None

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_byte(self, data: int) -> None:
        parts = self._get_parts()
        if not 0 <= data <= 0xff:
            raise ValueError('byte must be in range(0, 256)')
        parts.append(memoryview(int.to_bytes(data, length=1, byteorder='big')))
        self._pos += 1

    @override
    def write_bytes(self, data: Buffer) -> None:
        parts = self._get_parts()
        part = memoryview(data)
        # XXX: copy mutable buffers, the caller could change them before finalize is called
        if not part.readonly:
            part = memoryview(part.tobytes())
        parts.append(part)
        self._pos += part.nbytes
