"""
Logging configuration for the API service.

structlog renders every record; stdlib logging is only the transport.
Anything bound with ``structlog.contextvars`` (the request id, set by the
logging middleware) is merged into each event of that request.
"""

import sys
import logging
import structlog

from .settings import AppSettings

# Libraries that log every statement or access line at INFO
NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "passlib")


def configure_structured_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    stream=None,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Format type ('json' or 'console')
        stream: Output stream (defaults to stdout)
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stdout,
        level=level,
        force=True,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def setup_application_logging(settings: AppSettings) -> structlog.stdlib.BoundLogger:
    """
    Setup logging for the application from its settings.

    Development gets the colored console renderer, every other environment
    uses the configured format (JSON by default).

    Returns:
        Main application logger
    """
    log_format = "console" if settings.is_development else settings.log_format

    configure_structured_logging(
        log_level=settings.log_level,
        log_format=log_format,
    )

    return structlog.get_logger("yoga-api")
