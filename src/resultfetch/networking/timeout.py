"""Race an operation against a deadline."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from typing import Callable, TypeVar

from .errors import RequestTimeoutError
from .types import Err, Ok, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")


def with_timeout(
    operation: Callable[[], T],
    duration: float | None,
) -> Result[T, RequestTimeoutError]:
    """Run ``operation`` and wait at most ``duration`` seconds for it.

    Returns ``Ok`` with the operation's value when it settles first, or
    ``Err(RequestTimeoutError)`` when the deadline wins. The losing
    operation is abandoned: it is cancelled if it has not started, otherwise
    it finishes on its worker thread and its result is discarded. Exceptions
    raised by the operation propagate to the caller.

    A ``duration`` of ``None`` waits without a deadline.
    """
    if duration is not None and duration <= 0:
        raise ValueError("duration must be > 0 when provided")

    pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="with-timeout")
    future = pool.submit(operation)
    try:
        value = future.result(timeout=duration)
    except FuturesTimeoutError:
        future.cancel()
        logger.debug("operation abandoned after %ss deadline", duration)
        return Err(RequestTimeoutError(f"deadline of {duration}s elapsed"))
    finally:
        pool.shutdown(wait=False)
    return Ok(value)
