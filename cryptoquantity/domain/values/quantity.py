import math
from dataclasses import dataclass
from typing import Any, Mapping, Union

from cryptoquantity.domain.exceptions import (
    DivisionByZeroError,
    InvalidAmountError,
    PrecisionMismatchError,
)

from .precision import DEFAULT_PRECISION, validate_precision
from .scaling import (
    int_to_digits,
    parse_smallest_unit,
    rescale_magnitude,
    round_half_away_from_zero,
    scale_fraction,
    truncated_divmod,
)

Operand = Union["Quantity", int, str]


@dataclass(frozen=True)
class Quantity:
    """
    Exact fixed-point amount.

    ``magnitude`` is the amount in the smallest unit, i.e. the decimal value
    multiplied by ``10 ** precision``. Arithmetic and comparisons work on
    magnitudes and keep the receiver's precision. Another quantity used as an
    operand contributes its raw magnitude, its precision is only checked when
    ``strict=True`` is passed. Use ``from_quantity`` to align precisions first.
    """

    magnitude: int
    precision: int = DEFAULT_PRECISION

    def __post_init__(self) -> None:
        if isinstance(self.magnitude, bool) or not isinstance(self.magnitude, int):
            raise InvalidAmountError(self.magnitude, "magnitude must be an int")

        validate_precision(self.precision)

    # construction

    @classmethod
    def from_smallest_unit(
        cls, value: Union[int, str], precision: int = DEFAULT_PRECISION
    ) -> "Quantity":
        """
        Wrap an exact smallest-unit amount.

        :param value: int, or decimal digit string for values of any size
        :param precision: Number of decimal places

        :raises InvalidAmountError: If value is not an integer literal
        """
        return cls(parse_smallest_unit(value), precision)

    from_satoshis = from_smallest_unit

    @classmethod
    def from_float(cls, value: float, precision: int = DEFAULT_PRECISION) -> "Quantity":
        """
        Convert a float to the smallest unit.

        The integer and fractional parts are scaled separately, so large values
        don't lose digits by being multiplied by ``10 ** precision`` as a whole.
        Binary floats can't represent most decimal fractions exactly, so this
        entry point is lossy by nature.

        :param value: Amount as a float
        :param precision: Number of decimal places

        :raises InvalidAmountError: For NaN, infinities and non-numeric input
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidAmountError(value, "expected a float")

        precision = validate_precision(precision)

        if isinstance(value, int):
            return cls(value * 10**precision, precision)

        integer_part = round_half_away_from_zero(value)
        fraction = value - integer_part

        magnitude = integer_part * 10**precision + scale_fraction(fraction, precision)

        return cls(magnitude, precision)

    @classmethod
    def zero(cls, precision: int = DEFAULT_PRECISION) -> "Quantity":
        return cls(0, precision)

    @classmethod
    def from_quantity(
        cls, source: "Quantity", precision: int = DEFAULT_PRECISION
    ) -> "Quantity":
        """
        Re-express a quantity at another precision.

        Narrowing rounds on the first discarded digit only (5 and above round
        away from zero).

        :param source: Quantity to convert
        :param precision: Target precision
        """
        precision = validate_precision(precision)

        return cls(
            rescale_magnitude(source.magnitude, source.precision, precision), precision
        )

    @classmethod
    def unserialize(cls, data: Union[Mapping[str, Any], str, bytes]) -> "Quantity":
        from cryptoquantity.adapters.serialization import unserialize

        return unserialize(data)

    def to_precision(self, precision: int) -> "Quantity":
        return Quantity.from_quantity(self, precision)

    def serialize(self) -> dict:
        return {"value": self.get_smallest_unit_string(), "precision": self.precision}

    # accessors and views

    def get_precision(self) -> int:
        return self.precision

    def get_smallest_unit_string(self) -> str:
        return int_to_digits(self.magnitude)

    get_satoshis_string = get_smallest_unit_string

    def get_float_value(self) -> float:
        """
        Lossy float view, for display and interop only.
        Amounts beyond the float range come out as signed infinity.
        """
        quotient, remainder = truncated_divmod(self.magnitude, 10**self.precision)

        try:
            whole = float(quotient)
        except OverflowError:
            return math.copysign(math.inf, quotient)

        return whole + remainder / 10**self.precision

    def get_indivisible_amount_string(self) -> str:
        """Whole units only, the fractional part is discarded."""
        quotient, _ = truncated_divmod(self.magnitude, 10**self.precision)

        return int_to_digits(quotient)

    # arithmetic

    def add(self, other: Operand, *, strict: bool = False) -> "Quantity":
        return Quantity(self.magnitude + self._operand(other, strict), self.precision)

    def subtract(self, other: Operand, *, strict: bool = False) -> "Quantity":
        return Quantity(self.magnitude - self._operand(other, strict), self.precision)

    def multiply(self, other: Operand, *, strict: bool = False) -> "Quantity":
        return Quantity(self.magnitude * self._operand(other, strict), self.precision)

    def divide_and_round(
        self, divisor: Operand, round_up: bool = False, *, strict: bool = False
    ) -> "Quantity":
        """
        Truncating integer division.

        :param divisor: Quantity (raw magnitude), int or integer string
        :param round_up: Add one to the quotient when the remainder is positive

        :raises DivisionByZeroError: If divisor is zero
        """
        divisor_magnitude = self._operand(divisor, strict)
        if divisor_magnitude == 0:
            raise DivisionByZeroError()

        quotient, remainder = truncated_divmod(self.magnitude, divisor_magnitude)

        if round_up and remainder > 0:
            quotient += 1

        return Quantity(quotient, self.precision)

    # comparison

    def compare(self, other: Operand, *, strict: bool = False) -> int:
        """Three-way compare of magnitudes: -1, 0 or 1."""
        other_magnitude = self._operand(other, strict)

        return (self.magnitude > other_magnitude) - (self.magnitude < other_magnitude)

    def equals(self, other: Operand, *, strict: bool = False) -> bool:
        """
        Magnitude equality. Plain ints and strings are smallest-unit amounts,
        never decimal values.
        """
        return self.compare(other, strict=strict) == 0

    def gt(self, other: Operand, *, strict: bool = False) -> bool:
        return self.compare(other, strict=strict) > 0

    def gte(self, other: Operand, *, strict: bool = False) -> bool:
        return self.compare(other, strict=strict) >= 0

    def lt(self, other: Operand, *, strict: bool = False) -> bool:
        return self.compare(other, strict=strict) < 0

    def lte(self, other: Operand, *, strict: bool = False) -> bool:
        return self.compare(other, strict=strict) <= 0

    def is_zero(self) -> bool:
        return self.equals(Quantity.zero(self.precision))

    # operators

    def __add__(self, other: Operand) -> "Quantity":
        return self.add(other)

    def __sub__(self, other: Operand) -> "Quantity":
        return self.subtract(other)

    def __mul__(self, other: Operand) -> "Quantity":
        return self.multiply(other)

    def __neg__(self) -> "Quantity":
        return Quantity(-self.magnitude, self.precision)

    def __abs__(self) -> "Quantity":
        return Quantity(abs(self.magnitude), self.precision)

    def __lt__(self, other: Any) -> bool:
        if not self._is_operand(other):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: Any) -> bool:
        if not self._is_operand(other):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other: Any) -> bool:
        if not self._is_operand(other):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: Any) -> bool:
        if not self._is_operand(other):
            return NotImplemented
        return self.gte(other)

    def __str__(self) -> str:
        return self.get_smallest_unit_string()

    def __repr__(self) -> str:
        return f"Quantity(magnitude={self.get_smallest_unit_string()}, precision={self.precision})"

    def _operand(self, other: Operand, strict: bool) -> int:
        if isinstance(other, Quantity):
            if strict and other.precision != self.precision:
                raise PrecisionMismatchError(self.precision, other.precision)
            return other.magnitude

        return parse_smallest_unit(other)

    @staticmethod
    def _is_operand(other: Any) -> bool:
        return isinstance(other, (Quantity, int, str)) and not isinstance(other, bool)
