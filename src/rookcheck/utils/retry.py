"""Retry utilities for rookcheck."""

from collections.abc import Callable
from typing import Any, TypeVar

from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from rookcheck.utils.logging import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def retry_on_exception(
    exceptions: tuple[type[Exception], ...] = (Exception,),
    max_attempts: int = 3,
    min_wait: float = 1,
    max_wait: float = 10,
    should_retry: Callable[[BaseException], bool] | None = None,
) -> Callable[[F], F]:
    """Decorator to retry a function on specific exceptions.

    Args:
        exceptions: Tuple of exception types to retry on
        max_attempts: Maximum number of retry attempts
        min_wait: Minimum wait time between retries (seconds)
        max_wait: Maximum wait time between retries (seconds)
        should_retry: Optional predicate narrowing which matching exceptions are retried

    Returns:
        Decorated function with retry logic
    """

    def before_sleep(retry_state: RetryCallState) -> None:
        """Log before sleeping between retries."""
        if retry_state.outcome and retry_state.outcome.failed:
            exception = retry_state.outcome.exception()
            logger.warning(
                "retry_attempt",
                attempt=retry_state.attempt_number,
                max_attempts=max_attempts,
                exception=type(exception).__name__,
                message=str(exception),
            )

    def _matches(exc: BaseException) -> bool:
        if not isinstance(exc, exceptions):
            return False
        return should_retry(exc) if should_retry else True

    return retry(
        retry=retry_if_exception(_matches),
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=1, min=min_wait, max=max_wait),
        before_sleep=before_sleep,
        reraise=True,
    )


def is_transient_api_error(exc: BaseException) -> bool:
    """Whether a Kubernetes API error is worth retrying.

    Server-side errors and throttling are transient; 4xx answers such as
    Forbidden or NotFound will not change on retry.

    Args:
        exc: Exception raised by the API call

    Returns:
        True for 429 and 5xx responses or errors without a status
    """
    status = getattr(exc, "status", None)
    if not status:
        return True
    return status == 429 or status >= 500
