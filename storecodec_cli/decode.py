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

import base64
import binascii
from argparse import ArgumentParser, Namespace

from structlog import get_logger

logger = get_logger()


def create_parser() -> ArgumentParser:
    from storecodec_cli.util import create_parser
    parser = create_parser()
    parser.add_argument('codec', help='Codec name, see list_codecs')
    parser.add_argument('data', help='Encoded value, in hex unless --base64 is given')
    parser.add_argument('--base64', action='store_true', help='The data is in base64')
    parser.add_argument('--allow-trailing', action='store_true', default=None,
                        help='Ignore bytes left over after the value')
    parser.add_argument('--config-yaml', help='Configuration yaml filepath')
    return parser


def parse_data(text: str, *, is_base64: bool) -> bytes:
    if is_base64:
        return base64.b64decode(text, validate=True)
    return bytes.fromhex(text)


def execute(args: Namespace) -> int:
    from storecodec.codecs import deserialize_from_bytes, get_codec
    from storecodec.conf.get_settings import get_settings
    from storecodec.serialization import SerializationError
    from storecodec_cli.values import format_value

    settings = get_settings(args.config_yaml)
    log = logger.new(codec=args.codec)

    try:
        codec = get_codec(args.codec)
    except ValueError as e:
        print(f'error: {e}')
        return 1

    try:
        data = parse_data(args.data, is_base64=args.base64)
    except (binascii.Error, ValueError) as e:
        print(f'error: invalid input data: {e}')
        return 1

    if len(data) > settings.MAX_INPUT_BYTES:
        print(f'error: input has {len(data)} bytes, the maximum is {settings.MAX_INPUT_BYTES}')
        return 1

    allow_trailing = settings.ALLOW_TRAILING_DATA if args.allow_trailing is None else args.allow_trailing
    try:
        value = deserialize_from_bytes(data, codec, allow_trailing=allow_trailing)
    except SerializationError as e:
        log.error('cannot decode value', failed_codec=e.codec, offset=e.offset, error=e.message,
                  error_type=type(e).__name__)
        print(f'error: {type(e).__name__}: {e.message}')
        print(f'  codec: {e.codec}')
        print(f'  offset: {e.offset}')
        return 1

    log.debug('value decoded', size=len(data))
    print(format_value(value))
    return 0


def main() -> int:
    parser = create_parser()
    args = parser.parse_args()
    return execute(args)
