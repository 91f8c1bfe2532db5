"""
Poll-until-terminal primitive.

Repeatedly calls a status function at a fixed interval until its result
satisfies a terminal predicate, the attempt budget runs out, or the
cancel event is set.

Dependencies: tenacity
System role: Reusable wait loop for asynchronous remote jobs
"""

import logging
import threading
from collections.abc import Callable
from typing import TypeVar

from tenacity import RetryError, Retrying, retry_if_result, stop_after_attempt, wait_fixed

from source_service.core.exceptions import JobCancelledError, PollExhaustedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def poll_until(
    fetch: Callable[[], T],
    is_terminal: Callable[[T], bool],
    interval: float,
    max_attempts: int,
    cancel_event: threading.Event | None = None,
) -> T:
    """
    Poll until a terminal value is observed.

    Exceptions raised by ``fetch`` are not retried; they propagate as-is.

    Args:
        fetch: Zero-argument status call
        is_terminal: Predicate on the fetched value
        interval: Seconds between polls
        max_attempts: Maximum number of fetch calls
        cancel_event: Interrupts the wait between polls when set

    Returns:
        The first value for which ``is_terminal`` is true

    Raises:
        PollExhaustedError: Budget spent without a terminal value
        JobCancelledError: Cancel event set before or between polls
    """
    cancel = cancel_event or threading.Event()

    def attempt() -> T:
        if cancel.is_set():
            raise JobCancelledError("Polling cancelled by shutdown")
        return fetch()

    def sleep(seconds: float) -> None:
        # Event.wait returns early when shutdown is signalled
        cancel.wait(seconds)

    retrying = Retrying(
        retry=retry_if_result(lambda value: not is_terminal(value)),
        stop=stop_after_attempt(max(1, max_attempts)),
        wait=wait_fixed(interval),
        sleep=sleep,
    )
    try:
        return retrying(attempt)
    except RetryError as e:
        logger.warning(f"{__name__}:poll_until - Exhausted after {max_attempts} attempts")
        raise PollExhaustedError(max(1, max_attempts)) from e
