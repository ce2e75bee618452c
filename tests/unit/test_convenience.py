from cryptoquantity import (
    ETHEREUM_PRECISION,
    Quantity,
    smallest_unit_to_value,
    value_to_smallest_unit,
)


def test_smallest_unit_to_value():
    assert smallest_unit_to_value(10000000000) == 100
    assert smallest_unit_to_value("10000000000") == 100
    assert smallest_unit_to_value(Quantity.from_smallest_unit("10000000000")) == 100
    assert smallest_unit_to_value(Quantity.from_smallest_unit(10**20, 18)) == 100


def test_value_to_smallest_unit():
    assert value_to_smallest_unit(100) == "10000000000"
    assert value_to_smallest_unit(1, ETHEREUM_PRECISION) == "1000000000000000000"
