from typing import Any

from cryptoquantity.domain.exceptions import InvalidPrecisionError

BITCOIN_PRECISION = 8
ETHEREUM_PRECISION = 18

DEFAULT_PRECISION = BITCOIN_PRECISION


def validate_precision(precision: Any) -> int:
    """
    Make sure precision is usable as a number of decimal digits.

    :param precision: Candidate precision
    :return: The same precision, as int

    :raises InvalidPrecisionError: If precision is not a non-negative int
    """
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise InvalidPrecisionError(precision)

    if precision < 0:
        raise InvalidPrecisionError(precision)

    return precision
