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

from pathlib import Path
from typing import Literal, Union

from pydantic import field_validator

from storecodec.utils.pydantic import BaseModel

# 16 MiB
DEFAULT_MAX_INPUT_BYTES = 16 * 1024 * 1024


class CodecSettings(BaseModel):
    """Settings of the command line tools.

    The library itself never reads settings, codecs behave the same regardless of what is configured here.
    """

    # Inputs larger than this are refused before decoding
    MAX_INPUT_BYTES: int = DEFAULT_MAX_INPUT_BYTES

    # How encoded values are printed
    OUTPUT_FORMAT: Literal['hex', 'base64'] = 'hex'

    # Whether decoding accepts bytes left over after the value
    ALLOW_TRAILING_DATA: bool = False

    @field_validator('MAX_INPUT_BYTES')
    @classmethod
    def _validate_max_input_bytes(cls, max_input_bytes: int) -> int:
        if max_input_bytes <= 0:
            raise ValueError(f'MAX_INPUT_BYTES must be greater than 0, got {max_input_bytes}')
        return max_input_bytes

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'CodecSettings':
        """Takes a filepath to a yaml file and returns a validated CodecSettings instance."""
        from storecodec.conf.loader import load_extended_yaml
        return cls.model_validate(load_extended_yaml(filepath))
