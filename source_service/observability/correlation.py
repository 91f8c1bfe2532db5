"""
Correlation ID context manager.

Manages correlation ID propagation for one queue delivery using contextvars.

Dependencies: contextvars
System role: Delivery tracing across pipeline stages
"""

import uuid
from contextvars import ContextVar

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Set correlation ID in context.

    Args:
        correlation_id: Optional correlation ID (generates new if None)

    Returns:
        str: The correlation ID that was set
    """
    value = correlation_id or uuid.uuid4().hex
    correlation_id_ctx.set(value)
    return value


def get_correlation_id() -> str:
    """Get current correlation ID from context."""
    return correlation_id_ctx.get()


def clear_correlation_id() -> None:
    """Clear correlation ID from context."""
    correlation_id_ctx.set("")
