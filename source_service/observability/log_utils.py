"""
Structured logging helpers.

Log ``extra`` values must stay small and printable: chunk texts, vector
lists and raw message bodies are summarized instead of dumped.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

MAX_VALUE_LENGTH = 500


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Render a value for a log record.

    Args:
        value: Any value
        max_length: Strings longer than this are truncated

    Returns:
        str: Printable, bounded representation
    """
    if value is None:
        return "None"
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    if isinstance(value, (list, tuple, set)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"

    rendered = value if isinstance(value, str) else str(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + f"... (truncated, {len(rendered)} total)"
    return rendered


def error_context(exc: BaseException) -> dict[str, Any]:
    """
    Describe an exception for structured logs.

    Adds the retryable flag carried by service errors so a log line tells
    whether the delivery will be redelivered.
    """
    return {
        "error_type": type(exc).__name__,
        "error_msg": safe_log_value(str(exc)),
        "retryable": bool(getattr(exc, "retryable", False)),
    }


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context,
) -> None:
    """
    Log an exception with its traceback and rendered context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Extra fields (source_id, step, chunk_index, ...)
    """
    extra = {key: safe_log_value(val) for key, val in context.items()}
    extra.update(error_context(exc))
    logger.error(message, exc_info=exc, extra=extra)
