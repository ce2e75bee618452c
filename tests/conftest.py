import pytest


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JSON_LOGS", "false")
    monkeypatch.setenv("DEFAULT_PRECISION", "8")
    monkeypatch.setenv("MAX_PRECISION", "36")
    monkeypatch.setenv("STRICT_PRECISION", "false")

    from cryptoquantity.shared.config import get_settings

    get_settings.cache_clear()
