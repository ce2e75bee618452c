from .base import DomainException
from .quantity import (
    DivisionByZeroError,
    InvalidAmountError,
    InvalidPrecisionError,
    InvalidSerializationError,
    PrecisionMismatchError,
    QuantityError,
)

__all__ = [
    "DomainException",
    "QuantityError",
    "InvalidAmountError",
    "InvalidPrecisionError",
    "InvalidSerializationError",
    "DivisionByZeroError",
    "PrecisionMismatchError",
]
