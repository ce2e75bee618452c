import io
import logging

from cryptoquantity.shared.logging import (
    DEFAULT_LOGGER_LEVELS,
    PACKAGE_LOGGER,
    apply_logger_levels,
    configure_logging,
    get_logger,
)


def test_apply_logger_levels_sets_package_and_defaults():
    # When
    applied = apply_logger_levels("INFO")

    # Then
    assert applied[PACKAGE_LOGGER] == logging.INFO
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO
    for name in DEFAULT_LOGGER_LEVELS:
        assert logging.getLogger(name).level == logging.WARNING


def test_overrides_never_more_verbose_than_base_level():
    applied = apply_logger_levels(
        "WARNING",
        {
            "cryptoquantity.adapters.serialization": "error",
            "cryptoquantity.domain.services": "DEBUG",
        },
    )

    assert applied["cryptoquantity.adapters.serialization"] == logging.ERROR
    assert applied["cryptoquantity.domain.services"] == logging.WARNING

    apply_logger_levels("INFO")


def test_configure_logging_accepts_custom_stream():
    stream = io.StringIO()

    configure_logging(log_level="INFO", json_logs=True, stream=stream)

    assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO
    assert get_logger("cryptoquantity.test") is not None
