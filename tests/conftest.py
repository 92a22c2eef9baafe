import pytest

from letcalc.letcalc_parser import Parser


@pytest.fixture  # type: ignore[misc]
def parser() -> Parser:
    return Parser()
