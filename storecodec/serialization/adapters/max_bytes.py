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

from typing import TypeVar

from typing_extensions import override

from storecodec.serialization.deserializer import Deserializer
from storecodec.serialization.exceptions import AllocationError, InvalidEncodingError, TruncatedInputError
from storecodec.serialization.serializer import Serializer

from ..types import Buffer
from .generic_adapter import GenericDeserializerAdapter, GenericSerializerAdapter

S = TypeVar('S', bound=Serializer)
D = TypeVar('D', bound=Deserializer)


class MaxBytesSerializer(GenericSerializerAdapter[S]):
    """ A serializer that can hold at most `max_bytes` bytes, writing past that raises AllocationError.

    After the error is raised the adapted serializer cannot be used anymore. It is possible that the inner serializer
    is still usable, but the point where the writing stopped leaves the rest of the data unusable, so it should be
    considered a failed serialization overall, and not simply a failed write.
    """

    def __init__(self, serializer: S, max_bytes: int) -> None:
        if max_bytes < 0:
            raise ValueError('max_bytes cannot be negative')
        super().__init__(serializer)
        self._bytes_left = max_bytes

    def _check_update_exceeds(self, write_size: int) -> None:
        self._bytes_left -= write_size
        if self._bytes_left < 0:
            raise AllocationError('maximum number of bytes exceeded', offset=self.cur_pos())

    @override
    def write_byte(self, data: int) -> None:
        self._check_update_exceeds(1)
        super().write_byte(data)

    @override
    def write_bytes(self, data: Buffer) -> None:
        data_view = memoryview(data)
        self._check_update_exceeds(data_view.nbytes)
        super().write_bytes(data_view)


class MaxBytesDeserializer(GenericDeserializerAdapter[D]):
    """ A window over the inner deserializer that allows reading at most `max_bytes` bytes.

    From the point of view of the caller the stream ends at the window's end: reading past it raises
    TruncatedInputError and `remaining()` never counts bytes outside of the window.
    """

    def __init__(self, deserializer: D, max_bytes: int) -> None:
        if max_bytes < 0:
            raise ValueError('max_bytes cannot be negative')
        super().__init__(deserializer)
        self._bytes_left = max_bytes

    def _check_exceeds(self, read_size: int) -> None:
        if read_size > self._bytes_left:
            raise TruncatedInputError('maximum number of bytes exceeded', offset=self.cur_pos())

    @override
    def finalize(self) -> None:
        """Check that the whole window was consumed, the inner deserializer stays usable for what follows it."""
        if not self.is_empty():
            raise InvalidEncodingError('trailing data', offset=self.cur_pos())

    @override
    def remaining(self) -> int:
        return min(self._bytes_left, super().remaining())

    @override
    def is_empty(self) -> bool:
        return self.remaining() == 0

    @override
    def peek_byte(self) -> int:
        self._check_exceeds(1)
        return super().peek_byte()

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        if exact:
            self._check_exceeds(n)
        else:
            n = min(n, self._bytes_left)
        return super().peek_bytes(n, exact=exact)

    @override
    def read_byte(self) -> int:
        self._check_exceeds(1)
        result = super().read_byte()
        self._bytes_left -= 1
        return result

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        if exact:
            self._check_exceeds(n)
        else:
            n = min(n, self._bytes_left)
        result = super().read_bytes(n, exact=exact)
        self._bytes_left -= len(memoryview(result))
        return result

    @override
    def read_all(self) -> Buffer:
        return self.read_bytes(self.remaining())
