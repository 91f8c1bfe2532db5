"""
Observability module.

Provides logging configuration, safe structured logging helpers and
correlation ID tracking for queue deliveries.
"""

from source_service.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from source_service.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
]
