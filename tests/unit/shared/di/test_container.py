from cryptoquantity.adapters.serialization import QuantityCodec
from cryptoquantity.domain.services.factory import QuantityFactory
from cryptoquantity.shared.config import get_settings
from cryptoquantity.shared.di import get_container


def test_container_wires_settings_into_policy(monkeypatch):
    # Given
    get_settings.cache_clear()
    monkeypatch.setenv("DEFAULT_PRECISION", "18")
    monkeypatch.setenv("STRICT_PRECISION", "true")

    # When
    container = get_container()
    policy = container.precision_policy()

    # Then
    assert policy.default_precision == 18
    assert policy.max_precision == 36
    assert policy.strict is True
    assert container.quantity_factory().zero().precision == 18


def test_container_singletons():
    container = get_container()

    assert isinstance(container.quantity_factory(), QuantityFactory)
    assert isinstance(container.quantity_codec(), QuantityCodec)
    assert container.precision_service() is container.precision_service()
