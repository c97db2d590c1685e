import doctest
import importlib

import pytest

MODULES_WITH_DOCTESTS = [
    'storecodec.serialization.encoding.bool',
    'storecodec.serialization.encoding.bytes',
    'storecodec.serialization.encoding.int',
    'storecodec.serialization.encoding.leb128',
    'storecodec.serialization.encoding.utf8',
    'storecodec.serialization.compound_encoding.optional',
    'storecodec.codecs',
    'storecodec.codecs.helpers',
    'storecodec.utils.dict',
    'storecodec_cli.values',
]


@pytest.mark.parametrize('module_name', MODULES_WITH_DOCTESTS)
def test_doctests(module_name: str) -> None:
    module = importlib.import_module(module_name)
    result = doctest.testmod(module)
    assert result.attempted > 0
    assert result.failed == 0
