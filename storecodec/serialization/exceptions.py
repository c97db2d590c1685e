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


class SerializationError(Exception):
    """Base class for every error raised while reading or writing a byte stream.

    Errors carry the byte offset where they were detected and the name of the codec that was running, when known.
    Both are filled as the error travels up: the byte source sets the offset, `Codec.deserialize` sets the codec. They
    are meant for diagnosing corrupted persisted data, the message itself never depends on them.
    """

    def __init__(self, message: str = '', *, offset: Optional[int] = None, codec: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.offset = offset
        self.codec = codec

    def __str__(self) -> str:
        details = []
        if self.codec is not None:
            details.append(f'codec={self.codec}')
        if self.offset is not None:
            details.append(f'offset={self.offset}')
        if not details:
            return self.message
        return f'{self.message} ({", ".join(details)})'


class TruncatedInputError(SerializationError):
    """The stream ended before an operation could complete."""


class InvalidEncodingError(SerializationError, ValueError):
    """The bytes do not form a valid value of the target type."""


class IntegerOverflowError(SerializationError, OverflowError):
    """A packed integer decodes to a magnitude that does not fit the target width."""


class AllocationError(SerializationError, MemoryError):
    """A byte sink cannot grow to hold what is being written.

    This is fatal for the value being written, the sink must not be used anymore.
    """
