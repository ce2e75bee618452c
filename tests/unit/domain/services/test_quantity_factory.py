import pytest

from cryptoquantity.domain.exceptions import InvalidAmountError, InvalidPrecisionError
from cryptoquantity.domain.services.factory import QuantityFactory
from cryptoquantity.domain.services.precision_service import (
    PrecisionPolicy,
    PrecisionService,
)
from cryptoquantity.domain.values import Quantity


@pytest.fixture
def factory() -> QuantityFactory:
    return QuantityFactory(PrecisionService(PrecisionPolicy(default_precision=18)))


def test_create_uses_policy_default_precision(factory):
    q = factory.create(123450000000000)

    assert q.precision == 18
    assert q.get_float_value() == 0.00012345


def test_create_with_explicit_precision(factory):
    assert factory.from_string("12345", 8) == Quantity(12345, 8)


def test_from_float(factory):
    assert factory.from_float(1).get_smallest_unit_string() == "1000000000000000000"
    assert factory.from_float(0.12345, 8).get_smallest_unit_string() == "12345000"


def test_zero(factory):
    assert factory.zero() == Quantity(0, 18)
    assert factory.zero(2) == Quantity(0, 2)


def test_from_quantity(factory):
    source = Quantity.from_smallest_unit(12345000, 8)

    assert factory.from_quantity(source) == Quantity(123450000000000000, 18)
    assert factory.from_quantity(source, 2) == Quantity(12, 2)


def test_errors_propagate(factory):
    with pytest.raises(InvalidAmountError):
        factory.create("1.5")
    with pytest.raises(InvalidPrecisionError):
        factory.zero(100)
