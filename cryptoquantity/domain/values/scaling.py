import math
import re
import sys
from decimal import ROUND_HALF_UP, Decimal
from fractions import Fraction
from typing import Any

from cryptoquantity.domain.exceptions import InvalidAmountError

_INTEGER_LITERAL = re.compile(r"-?[0-9]+")

# int <-> str conversions are done in blocks this size, well below the
# interpreter's max str digits limit.
_BLOCK_DIGITS = 1000
_BLOCK = 10**_BLOCK_DIGITS

# 10 ** precision still converts to float up to this exponent.
_MAX_FLOAT_EXPONENT = sys.float_info.max_10_exp


def digits_to_int(text: str) -> int:
    """Parse a ``-?[0-9]+`` literal of any length."""
    negative = text.startswith("-")
    digits = text[1:] if negative else text

    result = 0
    for start in range(0, len(digits), _BLOCK_DIGITS):
        block = digits[start : start + _BLOCK_DIGITS]
        result = result * 10 ** len(block) + int(block)

    return -result if negative else result


def int_to_digits(value: int) -> str:
    """Canonical base-10 string of an int of any size."""
    sign = "-" if value < 0 else ""
    value = abs(value)

    if value < _BLOCK:
        return sign + str(value)

    blocks = []
    while value:
        value, block = divmod(value, _BLOCK)
        blocks.append(block)

    head = str(blocks.pop())

    return sign + head + "".join(str(block).zfill(_BLOCK_DIGITS) for block in reversed(blocks))


def parse_smallest_unit(value: Any) -> int:
    """
    Read an exact smallest-unit integer from an int or a base-10 digit string.

    :param value: int, or str matching ``-?[0-9]+``
    :return: Parsed integer

    :raises InvalidAmountError: For floats, bools, malformed strings and anything else
    """
    if isinstance(value, bool):
        raise InvalidAmountError(value, "booleans are not amounts")

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        if not _INTEGER_LITERAL.fullmatch(value):
            raise InvalidAmountError(_preview(value), "not a base-10 integer literal")
        return digits_to_int(value)

    raise InvalidAmountError(
        value, f"expected int or integer string, got {type(value).__name__}"
    )


def _preview(value: str, limit: int = 40) -> str:
    return value if len(value) <= limit else f"{value[:limit]}... ({len(value)} chars)"


def round_half_away_from_zero(value: float) -> int:
    """Round a float to the nearest int, ties away from zero, using its exact binary value."""
    if not math.isfinite(value):
        raise InvalidAmountError(value, "not a finite number")

    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def scale_fraction(fraction: float, precision: int) -> int:
    """
    Round ``fraction * 10 ** precision`` to an int, ties away from zero.

    The product is taken in float arithmetic while ``10 ** precision`` fits a
    float, and exactly beyond that.
    """
    if precision <= _MAX_FLOAT_EXPONENT:
        return round_half_away_from_zero(fraction * 10**precision)

    if not math.isfinite(fraction):
        raise InvalidAmountError(fraction, "not a finite number")

    scaled = abs(Fraction(fraction) * 10**precision)
    rounded = math.floor(scaled + Fraction(1, 2))

    return -rounded if fraction < 0 else rounded


def truncated_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """
    Integer division with the quotient truncated toward zero.
    The remainder carries the sign of the dividend, so ``q * divisor + r == dividend``.
    """
    quotient, remainder = divmod(abs(dividend), abs(divisor))

    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    if dividend < 0:
        remainder = -remainder

    return quotient, remainder


def rescale_magnitude(magnitude: int, source_precision: int, target_precision: int) -> int:
    """
    Re-express a smallest-unit magnitude at another precision.

    Widening appends zero digits. Narrowing drops the trailing digits and rounds
    up (away from zero) when the first dropped digit is 5 or more. Only that one
    digit decides, the rest of the dropped digits are ignored. Magnitudes shorter
    than the number of dropped digits are treated as having leading zeros.

    :param magnitude: Amount in the smallest unit of source_precision
    :param source_precision: Precision the magnitude is expressed in
    :param target_precision: Precision to express it in
    :return: Magnitude in the smallest unit of target_precision
    """
    delta = target_precision - source_precision

    if delta == 0:
        return magnitude

    sign = -1 if magnitude < 0 else 1
    absolute = abs(magnitude)

    if delta > 0:
        return sign * absolute * 10**delta

    dropped = -delta
    kept, discarded = divmod(absolute, 10**dropped)
    rounding_digit = discarded // 10 ** (dropped - 1)

    if rounding_digit >= 5:
        kept += 1

    return sign * kept


def narrowing_remainder(magnitude: int, source_precision: int, target_precision: int) -> int:
    """Absolute value of the digits a narrowing conversion discards, 0 when widening."""
    dropped = source_precision - target_precision

    if dropped <= 0:
        return 0

    return abs(magnitude) % 10**dropped
