"""
Per-step failure policy table.

Every pipeline step declares what its failure means for the job:
FATAL marks the source failed and propagates, DEGRADED and IGNORABLE are
logged and replaced by a fallback value.

Dependencies: logging (stdlib)
System role: Explicit failure semantics for the ingestion pipeline
"""

import enum
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from source_service.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FailurePolicy(str, enum.Enum):
    """How a step's failure affects the job."""

    FATAL = "fatal"
    DEGRADED = "degraded"
    IGNORABLE = "ignorable"


class PipelineStep(str, enum.Enum):
    """Named pipeline steps."""

    EXTRACT = "extract"
    IMAGE_BACKFILL = "image_backfill"
    TITLE_BACKFILL = "title_backfill"
    CHUNK = "chunk"
    EMBED_CHUNK = "embed_chunk"
    UPSERT = "upsert"
    MARK_STATUS = "mark_status"


STEP_POLICIES: dict[PipelineStep, FailurePolicy] = {
    PipelineStep.EXTRACT: FailurePolicy.FATAL,
    PipelineStep.IMAGE_BACKFILL: FailurePolicy.IGNORABLE,
    PipelineStep.TITLE_BACKFILL: FailurePolicy.IGNORABLE,
    PipelineStep.CHUNK: FailurePolicy.FATAL,
    PipelineStep.EMBED_CHUNK: FailurePolicy.DEGRADED,
    PipelineStep.UPSERT: FailurePolicy.FATAL,
    PipelineStep.MARK_STATUS: FailurePolicy.FATAL,
}


def run_step(
    step: PipelineStep,
    func: Callable[..., T],
    *args: Any,
    fallback: Any = None,
    context: dict[str, Any] | None = None,
    **kwargs: Any,
) -> T | Any:
    """
    Run one pipeline step under its declared policy.

    Args:
        step: Step being run
        func: Callable implementing the step
        *args: Positional arguments for func
        fallback: Value returned when a non-fatal step fails
        context: Extra log context (source_id, chunk_index, ...)
        **kwargs: Keyword arguments for func

    Returns:
        func's result, or ``fallback`` after a tolerated failure

    Raises:
        Exception: Whatever func raised, when the step is FATAL
    """
    policy = STEP_POLICIES[step]
    try:
        return func(*args, **kwargs)
    except Exception as e:
        if policy is FailurePolicy.FATAL:
            raise
        log_exception_with_context(
            logger,
            f"{__name__}:run_step - {step.value} failed ({policy.value}), continuing",
            e,
            step=step.value,
            **(context or {}),
        )
        return fallback
