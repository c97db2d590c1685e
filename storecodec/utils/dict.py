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

from copy import deepcopy
from typing import Any, TypeVar

K = TypeVar('K')


def deep_merge(base: dict[K, Any], override: dict[K, Any]) -> dict[K, Any]:
    """
    Return a new dict with the keys of `base` updated by `override`, mappings present in both are merged recursively.

    Neither argument is modified, and the result shares no mutable values with them.

    >>> base = dict(a=1, b=dict(c=2, d=3), e=dict(f=4))
    >>> deep_merge(base, dict(b=dict(d=5, g=6), e=7)) == dict(a=1, b=dict(c=2, d=5, g=6), e=7)
    True
    >>> base == dict(a=1, b=dict(c=2, d=3), e=dict(f=4))
    True
    """
    merged = deepcopy(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = deepcopy(value)
    return merged
