from typing import Union

from cryptoquantity.domain.services.precision_service import PrecisionService
from cryptoquantity.domain.values import Quantity


class QuantityFactory:
    """Builds quantities at the policy's default precision unless told otherwise."""

    def __init__(self, precision_service: PrecisionService):
        self._precision = precision_service

    def _resolve(self, precision: int = None) -> int:
        if precision is None:
            return self._precision.policy.default_precision
        return self._precision.validate(precision)

    def create(self, value: Union[int, str], precision: int = None) -> Quantity:
        return Quantity.from_smallest_unit(value, self._resolve(precision))

    def from_string(self, value: str, precision: int = None) -> Quantity:
        return self.create(value, precision)

    def from_float(self, value: float, precision: int = None) -> Quantity:
        return Quantity.from_float(value, self._resolve(precision))

    def zero(self, precision: int = None) -> Quantity:
        return Quantity.zero(self._resolve(precision))

    def from_quantity(self, source: Quantity, precision: int = None) -> Quantity:
        return self._precision.convert(source, self._resolve(precision))
