import logging
from dataclasses import dataclass

from cryptoquantity.domain.exceptions import (
    InvalidPrecisionError,
    PrecisionMismatchError,
)
from cryptoquantity.domain.values import (
    DEFAULT_PRECISION,
    Quantity,
    narrowing_remainder,
    validate_precision,
)
from cryptoquantity.shared.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PrecisionPolicy:
    """Policy defining which precisions are acceptable and how mismatches are handled."""

    default_precision: int = DEFAULT_PRECISION
    max_precision: int = 36
    strict: bool = False

    def __post_init__(self):
        validate_precision(self.default_precision)
        validate_precision(self.max_precision)

        if self.default_precision > self.max_precision:
            raise InvalidPrecisionError(
                self.default_precision,
                f"default precision exceeds max precision {self.max_precision}",
            )


class PrecisionService:
    """
    Domain service for moving quantities between precisions.
    """

    def __init__(self, policy: PrecisionPolicy = None):
        self._policy = policy or PrecisionPolicy()

    @property
    def policy(self) -> PrecisionPolicy:
        return self._policy

    def validate(self, precision: int) -> int:
        """
        Check that precision is allowed by the policy.

        :param precision: Precision to check
        :return: The same precision

        :raises InvalidPrecisionError: If precision is negative, not an int or above the max
        """
        validate_precision(precision)

        if precision > self._policy.max_precision:
            raise InvalidPrecisionError(
                precision, f"exceeds max precision {self._policy.max_precision}"
            )

        return precision

    def convert(self, quantity: Quantity, precision: int = None) -> Quantity:
        """
        Re-express quantity at the target precision.

        :param quantity: Quantity to convert
        :param precision: Target precision (default: policy default precision)

        :return: New quantity; narrowing rounds on the first dropped digit
        """
        if precision is None:
            precision = self._policy.default_precision

        self.validate(precision)

        converted = Quantity.from_quantity(quantity, precision)

        if precision < quantity.precision and logger.isEnabledFor(logging.DEBUG):
            lossless = (
                narrowing_remainder(quantity.magnitude, quantity.precision, precision) == 0
            )
            logger.debug(
                "quantity_rescaled",
                source_precision=quantity.precision,
                target_precision=precision,
                value=quantity.get_smallest_unit_string(),
                result=converted.get_smallest_unit_string(),
                lossless=lossless,
            )

        return converted

    def align(self, first: Quantity, second: Quantity) -> tuple[Quantity, Quantity]:
        """
        Bring two quantities to a common precision by widening the less precise one.
        Widening never rounds.

        :return: Both quantities, at max(first.precision, second.precision)
        """
        precision = max(first.precision, second.precision)

        return (
            Quantity.from_quantity(first, precision),
            Quantity.from_quantity(second, precision),
        )

    def check_compatible(self, first: Quantity, second: Quantity) -> bool:
        """
        Check whether two quantities can be mixed directly.

        :return: bool(precisions match)

        :raises PrecisionMismatchError: If they don't match and the policy is strict
        """
        if first.precision == second.precision:
            return True

        logger.warning(
            "precision_mismatch",
            expected=first.precision,
            actual=second.precision,
            strict=self._policy.strict,
        )

        if self._policy.strict:
            raise PrecisionMismatchError(first.precision, second.precision)

        return False
