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
Loading of settings files.

A settings file may start from another one with the reserved `extends` key, a path relative to the file that
declares it. Keys of the extending file override the extended ones, nested mappings are merged key by key.
"""

from pathlib import Path
from typing import Any, Union

import yaml

from storecodec.utils.dict import deep_merge

EXTENDS_KEY = 'extends'


def load_yaml_dict(filepath: Union[Path, str]) -> dict[str, Any]:
    """Read a single yaml file, which must hold a mapping. An empty file is an empty mapping."""
    path = Path(filepath)
    if not path.is_file():
        raise ValueError(f"'{filepath}' is not a file")

    with path.open('r') as file:
        contents = yaml.safe_load(file)

    if contents is None:
        return {}
    if not isinstance(contents, dict):
        raise ValueError(f"'{filepath}' cannot be parsed as a dictionary")
    return contents


def load_extended_yaml(filepath: Union[Path, str]) -> dict[str, Any]:
    """Read a yaml file following its chain of `extends`, the returned mapping never has the `extends` key."""
    path = Path(filepath).resolve()
    chain: list[Path] = []
    layers: list[dict[str, Any]] = []

    while True:
        if path in chain:
            raise ValueError(f"'{path}' is extended more than once, recursive extends are not allowed")
        chain.append(path)
        contents = load_yaml_dict(path)
        parent = contents.pop(EXTENDS_KEY, None)
        layers.append(contents)
        if not parent:
            break
        path = (path.parent / str(parent)).resolve()

    # the first file read is the one with the highest precedence
    merged: dict[str, Any] = {}
    for layer in reversed(layers):
        merged = deep_merge(merged, layer)
    return merged
