"""
Logger configuration.

Provides a configured root logger with ISO timestamps and the current
delivery's correlation ID on every record.

Dependencies: logging (stdlib), source_service.observability.correlation
System role: Centralized logging configuration
"""

import logging
import sys

from source_service.observability.correlation import get_correlation_id

NOISY_LOGGERS = ("urllib3", "botocore", "boto3", "httpx", "httpcore", "amqp", "kombu")


class CorrelationIdFilter(logging.Filter):
    """Attach the active correlation ID to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    """
    Configure Python logging with ISO timestamp and structured format.

    Args:
        level: Root log level name (DEBUG, INFO, ...)
    """
    # Remove any existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    handler.addFilter(CorrelationIdFilter())

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    root_logger.setLevel(level.upper())
    root_logger.addHandler(handler)

    # Reduce noise from verbose third-party libraries
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

