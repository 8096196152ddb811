"""Structured logging setup for enum-traits.

Library modules log through ``logging.getLogger(__name__)``. Declaration
events go through :func:`get_logger`, a structlog logger wrapped around
the stdlib logger of the same name, so they respect stdlib levels and
handlers and carry key/value context in ``extra``.

Applications call :func:`configure_logging` once from their entry point.
"""

import logging

import structlog

from enum_traits.config.settings import Environment, Settings, get_settings

_LOG_NAME_TO_LEVEL: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog rendering and the ``enum_traits`` logger level."""
    settings = settings or get_settings()
    level = _LOG_NAME_TO_LEVEL[settings.LOG_LEVEL.value]

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.ENVIRONMENT == Environment.DEV
            else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.getLogger("enum_traits").setLevel(level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Structlog logger that emits through ``logging.getLogger(name)``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.render_to_log_kwargs,
        ],
    )
