# smartcareer/services/retry.py
from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Callable, TypeVar

from tenacity import (
    RetryError, Retrying, retry_if_exception, stop_after_attempt, wait_fixed,
)

from .errors import TransientUpstreamError

logger = logging.getLogger(__name__)

T = TypeVar("T")

RETRYABLE_STATUSES = frozenset({429, 502, 503})


def is_transient(exc: BaseException) -> bool:
    """
    Rate limits and gateway hiccups are worth another attempt.
    The message check matches any error text containing "429", so an unrelated
    error that merely mentions that number is retried too.
    """
    if getattr(exc, "status", None) in RETRYABLE_STATUSES:
        return True
    return "429" in str(exc)


@dataclass(frozen=True)
class RetryPolicy:
    max_retries: int = 5     # attempts after the first one
    delay: float = 6.0       # fixed, seconds
    should_retry: Callable[[BaseException], bool] = is_transient

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1


def _log_retry(retry_state) -> None:
    logger.warning("Attempt %d failed (%s); retrying in %.1fs",
                   retry_state.attempt_number,
                   retry_state.outcome.exception(),
                   retry_state.next_action.sleep)


def call_with_retry(
    fn: Callable[[], T],
    policy: RetryPolicy,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """
    Run fn, retrying on errors accepted by policy.should_retry with a fixed
    delay between attempts. Other errors propagate untouched. When retries run
    out, raise TransientUpstreamError chained to the last error.
    """
    retrying = Retrying(
        stop=stop_after_attempt(policy.max_attempts),
        wait=wait_fixed(policy.delay),
        retry=retry_if_exception(policy.should_retry),
        sleep=sleep,
        before_sleep=_log_retry,
        reraise=False,
    )
    try:
        return retrying(fn)
    except RetryError as e:
        attempts = e.last_attempt.attempt_number
        last = e.last_attempt.exception()
        logger.error("Giving up after %d attempts: %s", attempts, last)
        raise TransientUpstreamError(
            f"AI service still unavailable after {attempts} attempts: {last}",
            attempts=attempts, last_error=last,
        ) from last


__all__ = ["RETRYABLE_STATUSES", "is_transient", "RetryPolicy", "call_with_retry"]
