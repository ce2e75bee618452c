import logging
import sys
from typing import Mapping, Optional, TextIO

import structlog
from structlog.types import Processor

PACKAGE_LOGGER = "cryptoquantity"

# Loggers that only need to report problems unless overridden.
DEFAULT_LOGGER_LEVELS: dict[str, str] = {
    "cryptoquantity.shared.config": "WARNING",
    "cryptoquantity.shared.di": "WARNING",
}


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)  # type: ignore [no-any-return]


def apply_logger_levels(
    log_level: str, logger_levels: Optional[Mapping[str, str]] = None
) -> dict[str, int]:
    """
    Set the package logger to log_level and apply per-logger overrides on top.

    Overrides are never more verbose than log_level, so DEBUG noise from a
    single module can be muted without muting the rest of the package.

    :param log_level: Level for the ``cryptoquantity`` logger
    :param logger_levels: Logger name -> level name; merged over DEFAULT_LOGGER_LEVELS
    :return: Effective numeric level per configured logger
    """
    base_level = getattr(logging, log_level.upper())
    logging.getLogger(PACKAGE_LOGGER).setLevel(base_level)

    levels = {**DEFAULT_LOGGER_LEVELS, **(logger_levels or {})}
    applied = {PACKAGE_LOGGER: base_level}

    for name, level in levels.items():
        numeric = max(getattr(logging, level.upper()), base_level)
        logging.getLogger(name).setLevel(numeric)
        applied[name] = numeric

    return applied


def configure_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
    logger_levels: Optional[Mapping[str, str]] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure package-wide logging with structlog.

    Logs go to stderr by default, stdout is left to command output.

    :param log_level: Logging level [DEBUG, INFO, WARNING, ERROR, CRITICAL]
    :param json_logs: Logging output format will be JSON if set to True
    :param logger_levels: Per-logger level overrides, see apply_logger_levels
    :param stream: Destination of rendered log lines (default: sys.stderr)
    """
    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stderr,
        level=getattr(logging, log_level.upper()),
    )

    apply_logger_levels(log_level, logger_levels)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    renderer: Processor
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream is None and sys.stderr.isatty())

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging()
