import cattrs
import pytest

from rustic.utils import serialization


@pytest.fixture
def json_converter() -> cattrs.Converter:
    return serialization.copy_converter(serialization.converters["json"])
