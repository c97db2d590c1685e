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
from argparse import ArgumentParser, Namespace

from structlog import get_logger

logger = get_logger()


def create_parser() -> ArgumentParser:
    from storecodec_cli.util import create_parser
    parser = create_parser()
    parser.add_argument('codec', help='Codec name, see list_codecs')
    parser.add_argument('value', nargs='?',
                        help='Value to encode (integers in decimal, booleans as true/false or 1/0, bytes in hex)')
    parser.add_argument('--null', action='store_true', help='Encode an absent value, nothing is written')
    parser.add_argument('--config-yaml', help='Configuration yaml filepath')
    output_args = parser.add_mutually_exclusive_group()
    output_args.add_argument('--hex', dest='output_format', action='store_const', const='hex',
                             help='Print the result in hex (default)')
    output_args.add_argument('--base64', dest='output_format', action='store_const', const='base64',
                             help='Print the result in base64')
    return parser


def execute(args: Namespace) -> int:
    from storecodec.codecs import get_codec, serialize_to_bytes, serialize_to_bytes_nullable
    from storecodec.conf.get_settings import get_settings
    from storecodec_cli.values import parse_value

    settings = get_settings(args.config_yaml)
    log = logger.new(codec=args.codec)

    try:
        codec = get_codec(args.codec)
    except ValueError as e:
        print(f'error: {e}')
        return 1

    if args.null:
        value = None
    elif args.value is None:
        print('error: a value is required unless --null is given')
        return 1
    else:
        try:
            value = parse_value(codec, args.value)
        except ValueError as e:
            print(f'error: invalid value: {e}')
            return 1

    try:
        # --null is an absent value, a parsed `null` is encoded by the optional codec with its presence flag
        data = serialize_to_bytes_nullable(None, codec) if args.null else serialize_to_bytes(value, codec)
    except (TypeError, ValueError) as e:
        print(f'error: cannot encode value: {e}')
        return 1

    if data is None:
        log.debug('absent value, nothing encoded')
        print('null')
        return 0

    output_format = args.output_format or settings.OUTPUT_FORMAT
    log.debug('value encoded', size=len(data), output_format=output_format)
    if output_format == 'base64':
        print(base64.b64encode(data).decode('ascii'))
    else:
        print(data.hex())
    return 0


def main() -> int:
    parser = create_parser()
    args = parser.parse_args()
    return execute(args)
