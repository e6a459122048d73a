"""Retry with exponential backoff for the Gemini fallback call.

Transient failures (rate limits, server errors, dropped connections) are
retried with exponential backoff plus jitter. Client errors are raised
immediately.
"""

import functools
import logging
import random
import time
from typing import Any, Callable, Optional, Set, Tuple, Type, TypeVar, cast

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

RETRYABLE_STATUS_CODES: Set[int] = {
    429,  # Rate limit
    500,  # Server error
    502,  # Bad gateway
    503,  # Service unavailable
    504,  # Gateway timeout
}

NON_RETRYABLE_STATUS_CODES: Set[int] = {400, 401, 403, 404, 422}

NETWORK_ERROR_MARKERS = (
    "timeout",
    "timed out",
    "connection",
    "network",
    "unavailable",
)

MAX_RETRIES = 3
BASE_DELAY = 1.0  # seconds
MAX_JITTER = 0.5  # seconds


def compute_delay(attempt: int, base_delay: float = BASE_DELAY, max_jitter: float = MAX_JITTER) -> float:
    """Backoff before retry number ``attempt + 1``: base * 2**attempt plus jitter."""
    return (base_delay * (2 ** attempt)) + (random.random() * max_jitter)


def retry_with_backoff(
    max_retries: int = MAX_RETRIES,
    base_delay: float = BASE_DELAY,
    max_jitter: float = MAX_JITTER,
    retryable_exceptions: Tuple[Type[Exception], ...] = (ConnectionError, TimeoutError),
) -> Callable[[F], F]:
    """Decorator that retries a synchronous call with exponential backoff.

    Args:
        max_retries: Retry attempts after the first call
        base_delay: Base delay in seconds for exponential backoff
        max_jitter: Maximum random jitter in seconds
        retryable_exceptions: Exception types retried even without a status code

    Returns:
        Decorated function with retry logic
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            attempt = 0
            while True:
                try:
                    return func(*args, **kwargs)
                except Exception as e:
                    if not should_retry_exception(e, retryable_exceptions):
                        raise
                    if attempt >= max_retries:
                        logger.error(f"{func.__name__} failed after {max_retries} retries: {e}")
                        raise

                    delay = compute_delay(attempt, base_delay, max_jitter)
                    logger.warning(
                        f"{func.__name__} attempt {attempt + 1}/{max_retries} failed: {e}. "
                        f"Retrying in {delay:.2f}s..."
                    )
                    time.sleep(delay)
                    attempt += 1

        return cast(F, wrapper)

    return decorator


def should_retry_exception(
    exception: Exception,
    retryable_exceptions: Tuple[Type[Exception], ...] = (ConnectionError, TimeoutError),
) -> bool:
    """Decide whether an exception is transient.

    A status code, when present, decides. Otherwise network-sounding messages
    and the ``retryable_exceptions`` types are retried.
    """
    status_code = extract_status_code(exception)
    if status_code is not None:
        if status_code in NON_RETRYABLE_STATUS_CODES:
            return False
        if status_code in RETRYABLE_STATUS_CODES:
            return True

    message = str(exception).lower()
    if any(marker in message for marker in NETWORK_ERROR_MARKERS):
        return True

    return isinstance(exception, retryable_exceptions)


def extract_status_code(exception: Exception) -> Optional[int]:
    """Pull an HTTP status code off an SDK exception, if it carries one."""
    for attr in ("status_code", "code"):
        value = getattr(exception, attr, None)
        if isinstance(value, int):
            return value

    response = getattr(exception, "response", None)
    status = getattr(response, "status_code", None)
    if isinstance(status, int):
        return status

    return None
