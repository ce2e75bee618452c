from typing import Union

from cryptoquantity.adapters.serialization import (
    serialize,
    serialize_json,
    unserialize,
)
from cryptoquantity.domain.exceptions import (
    DivisionByZeroError,
    DomainException,
    InvalidAmountError,
    InvalidPrecisionError,
    InvalidSerializationError,
    PrecisionMismatchError,
    QuantityError,
)
from cryptoquantity.domain.values import (
    BITCOIN_PRECISION,
    DEFAULT_PRECISION,
    ETHEREUM_PRECISION,
    Quantity,
)


def smallest_unit_to_value(
    value: Union[Quantity, int, str], precision: int = DEFAULT_PRECISION
) -> float:
    """Float value of a smallest-unit amount. A quantity keeps its own precision."""
    if isinstance(value, Quantity):
        return value.get_float_value()

    return Quantity.from_smallest_unit(value, precision).get_float_value()


def value_to_smallest_unit(value: float, precision: int = DEFAULT_PRECISION) -> str:
    return Quantity.from_float(value, precision).get_smallest_unit_string()


__all__ = [
    "Quantity",
    "BITCOIN_PRECISION",
    "ETHEREUM_PRECISION",
    "DEFAULT_PRECISION",
    "DomainException",
    "QuantityError",
    "InvalidAmountError",
    "InvalidPrecisionError",
    "InvalidSerializationError",
    "DivisionByZeroError",
    "PrecisionMismatchError",
    "serialize",
    "serialize_json",
    "unserialize",
    "smallest_unit_to_value",
    "value_to_smallest_unit",
]
