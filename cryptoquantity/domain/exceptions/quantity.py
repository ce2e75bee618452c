from typing import Any

from .base import DomainException


class QuantityError(DomainException):
    """Base exception for quantity-related errors."""

    pass


class InvalidAmountError(QuantityError):
    """Raised when an amount can't be read as an exact smallest-unit integer."""

    def __init__(self, value: Any, reason: str):
        self.value = value

        super().__init__(f"Invalid amount {value!r}: {reason}")


class InvalidPrecisionError(QuantityError):
    def __init__(self, precision: Any, reason: str = "must be a non-negative integer"):
        self.precision = precision

        super().__init__(f"Invalid precision {precision!r}: {reason}")


class InvalidSerializationError(QuantityError):
    """Raised when serialized data can't be resolved to a quantity."""

    def __init__(self, reason: str):
        super().__init__(f"Invalid serialized quantity: {reason}")


class DivisionByZeroError(QuantityError):
    def __init__(self) -> None:
        super().__init__("Division by zero")


class PrecisionMismatchError(QuantityError):
    """Raised in strict mode when quantities of different precisions are mixed."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual

        super().__init__(
            f"Precision mismatch: expected {expected} digits, got {actual} digits"
        )
