from .precision import (
    BITCOIN_PRECISION,
    DEFAULT_PRECISION,
    ETHEREUM_PRECISION,
    validate_precision,
)
from .quantity import Quantity
from .scaling import (
    int_to_digits,
    narrowing_remainder,
    rescale_magnitude,
    truncated_divmod,
)

__all__ = [
    "Quantity",
    "BITCOIN_PRECISION",
    "ETHEREUM_PRECISION",
    "DEFAULT_PRECISION",
    "validate_precision",
    "int_to_digits",
    "narrowing_remainder",
    "rescale_magnitude",
    "truncated_divmod",
]
