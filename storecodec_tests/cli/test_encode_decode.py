from contextlib import redirect_stdout
from io import StringIO
from pathlib import Path

import pytest
from structlog.testing import capture_logs

from storecodec.conf.get_settings import CONFIG_YAML_ENV_VAR
from storecodec_cli import decode, encode

FIXTURES_DIR = Path(__file__).parent.parent / 'others' / 'fixtures'


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_YAML_ENV_VAR, raising=False)


def _run(module, argv: list[str]) -> tuple[int, str]:
    parser = module.create_parser()
    args = parser.parse_args(argv)
    f = StringIO()
    with redirect_stdout(f):
        ret = module.execute(args)
    return ret, f.getvalue()


@pytest.mark.parametrize(
    ['argv', 'expected'],
    [
        (['int32', '300'], '0000012c'),
        (['int32', '300', '--base64'], 'AAABLA=='),
        (['int64', '0x10'], '0000000000000010'),
        (['packed_int32', '64'], 'c000'),
        (['utf8', 'héllo'], '0000000668c3a96c6c6f'),
        (['bytes', '010203'], '03010203'),
        (['bytes_nosize', '010203'], '010203'),
        (['bool', 'true'], '01'),
        (['bool', '1'], '01'),
        (['bool', 'FALSE'], '00'),
        (['bool', '0'], '00'),
        (['optional_int32', 'null'], '00'),
        (['optional_int32', '300'], '010000012c'),
        (['int32', '--null'], 'null'),
    ]
)
def test_encode(argv: list[str], expected: str) -> None:
    ret, output = _run(encode, argv)
    assert ret == 0
    assert output.strip() == expected


def test_encode_optional_none_differs_from_absent_value() -> None:
    ret, output = _run(encode, ['optional_int32', 'null'])
    assert ret == 0
    assert output.strip() == '00'

    ret, output = _run(encode, ['optional_int32', '--null'])
    assert ret == 0
    assert output.strip() == 'null'

    # what encode prints for a parsed `null` is accepted back by decode
    ret, output = _run(decode, ['optional_int32', '00'])
    assert ret == 0
    assert output.strip() == 'null'


def test_encode_output_format_from_settings() -> None:
    ret, output = _run(encode, ['int32', '300', '--config-yaml', str(FIXTURES_DIR / 'settings_extends.yml')])
    assert ret == 0
    assert output.strip() == 'AAABLA=='

    # the command line flag wins over the settings
    ret, output = _run(encode, ['int32', '300', '--hex', '--config-yaml', str(FIXTURES_DIR / 'settings_extends.yml')])
    assert ret == 0
    assert output.strip() == '0000012c'


@pytest.mark.parametrize(
    ['argv', 'message'],
    [
        (['float', '1.0'], 'error: unknown codec: float'),
        (['int32'], 'error: a value is required unless --null is given'),
        (['int32', 'abc'], 'error: invalid value'),
        (['bool', 'maybe'], 'error: invalid value: invalid boolean: maybe'),
        (['int32', '2147483648'], 'error: cannot encode value: above upper bound'),
    ]
)
def test_encode_errors(argv: list[str], message: str) -> None:
    ret, output = _run(encode, argv)
    assert ret == 1
    assert output.startswith(message)


@pytest.mark.parametrize(
    ['argv', 'expected'],
    [
        (['int32', '0000012c'], '300'),
        (['int32', 'AAABLA==', '--base64'], '300'),
        (['utf8', '0000000668c3a96c6c6f'], 'héllo'),
        (['bytes', 'AwECAw==', '--base64'], '010203'),
        (['bool', '00'], 'false'),
        (['optional_int32', '00'], 'null'),
        (['packed_int64', '7f'], '-1'),
        (['int32', '0000012c00', '--allow-trailing'], '300'),
    ]
)
def test_decode(argv: list[str], expected: str) -> None:
    ret, output = _run(decode, argv)
    assert ret == 0
    assert output.strip() == expected


def test_decode_truncated() -> None:
    with capture_logs() as cap_logs:
        ret, output = _run(decode, ['int32', '0000'])
    assert ret == 1
    assert output.splitlines() == [
        'error: TruncatedInputError: not enough bytes to read, needed 4, got 2',
        '  codec: int32',
        '  offset: 0',
    ]
    errors = [entry for entry in cap_logs if entry['log_level'] == 'error']
    assert len(errors) == 1
    assert errors[0]['event'] == 'cannot decode value'
    assert errors[0]['failed_codec'] == 'int32'
    assert errors[0]['offset'] == 0
    assert errors[0]['error_type'] == 'TruncatedInputError'


def test_decode_reports_innermost_codec() -> None:
    with capture_logs():
        ret, output = _run(decode, ['optional_int64', '01000000'])
    assert ret == 1
    assert '  codec: int64' in output.splitlines()
    assert '  offset: 1' in output.splitlines()


def test_decode_trailing_data() -> None:
    with capture_logs():
        ret, output = _run(decode, ['int32', '0000012c00'])
    assert ret == 1
    assert output.splitlines() == [
        'error: InvalidEncodingError: trailing data',
        '  codec: int32',
        '  offset: 4',
    ]

    # trailing data allowed by the settings
    ret, output = _run(decode, ['int32', '0000012c00', '--config-yaml', str(FIXTURES_DIR / 'settings_base.yml')])
    assert ret == 0
    assert output.strip() == '300'


def test_decode_invalid_input() -> None:
    ret, output = _run(decode, ['int32', 'xyz'])
    assert ret == 1
    assert output.startswith('error: invalid input data')

    ret, output = _run(decode, ['int32', '!!!', '--base64'])
    assert ret == 1
    assert output.startswith('error: invalid input data')


def test_decode_input_too_large() -> None:
    ret, output = _run(decode, ['int32', '0000012c', '--config-yaml', str(FIXTURES_DIR / 'settings_extends.yml')])
    assert ret == 1
    assert output.strip() == 'error: input has 4 bytes, the maximum is 2'
