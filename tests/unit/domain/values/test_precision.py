import pytest

from cryptoquantity.domain.exceptions import InvalidPrecisionError
from cryptoquantity.domain.values import (
    BITCOIN_PRECISION,
    DEFAULT_PRECISION,
    ETHEREUM_PRECISION,
    validate_precision,
)


def test_named_precisions():
    assert BITCOIN_PRECISION == 8
    assert ETHEREUM_PRECISION == 18
    assert DEFAULT_PRECISION == BITCOIN_PRECISION


def test_validate_precision():
    assert validate_precision(0) == 0
    assert validate_precision(18) == 18

    for bad in (-1, 1.0, "8", None, False):
        with pytest.raises(InvalidPrecisionError):
            validate_precision(bad)
