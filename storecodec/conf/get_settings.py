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

import os
from typing import Optional

from structlog import get_logger

from storecodec import conf
from storecodec.conf.settings import CodecSettings

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'STORECODEC_CONFIG_YAML'


def get_settings(filepath: Optional[str] = None) -> CodecSettings:
    """
    Load the settings from a yaml file.

    The file is, in order of precedence: the given `filepath`, the file in the 'STORECODEC_CONFIG_YAML' env var, or the
    bundled default settings. Nothing is cached, every call reads the file again.
    """
    source = filepath or os.environ.get(CONFIG_YAML_ENV_VAR, conf.DEFAULT_SETTINGS_FILEPATH)
    log = logger.new(source=source)
    log.debug('loading settings')
    return CodecSettings.from_yaml(filepath=source)
