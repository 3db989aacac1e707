"""
Structured logging setup for applications using the SDK.
"""

import logging

import structlog


def configure_logging(
    level: str = "INFO",
    format_json: bool = True,
    include_timestamp: bool = True,
) -> None:
    """
    Configure structlog over the standard library logging module.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        format_json: Whether to format logs as JSON
        include_timestamp: Whether to include timestamps
    """
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="ISO"))

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper()),
    )
