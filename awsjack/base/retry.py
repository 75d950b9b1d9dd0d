"""
Transport-level retry with exponential backoff.

Only the HTTP client uses this, and only for failures where no response was
received at all. Operations themselves never retry: a service error
response is handed back to the caller inside the outcome, with its
``retryable`` flag set for the caller to act on.
"""

from __future__ import annotations

import random
import time
from functools import wraps
from typing import Any, Callable

from botocore.exceptions import ConnectionError as BotoConnectionError, HTTPClientError

from awsjack.base.logger import aj_logger

# Connection refused/reset, DNS failures, connect and read timeouts.
_DEFAULT_RETRYABLE: tuple[type[BaseException], ...] = (BotoConnectionError, HTTPClientError)


def backoff_delay(attempt: int, base_delay: float, max_delay: float, backoff_factor: float) -> float:
    """Full-jitter delay before retry number *attempt* (1-based)."""
    ceiling = min(base_delay * backoff_factor ** (attempt - 1), max_delay)
    return random.uniform(0, ceiling)


def retry(
    max_attempts: int = 3,
    base_delay: float = 0.05,
    max_delay: float = 20.0,
    backoff_factor: float = 2.0,
    retryable_exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable:
    """Decorator: retry a function on transient exceptions with exponential backoff.

    Args:
        max_attempts: Maximum number of total attempts (including the first).
        base_delay: Upper bound of the first delay, in seconds.
        max_delay: Cap on the delay between retries.
        backoff_factor: Multiplier applied to the bound after each retry.
        retryable_exceptions: Exception types that trigger a retry.
            Defaults to botocore's connection and ``HTTPClientError`` families.

    Returns:
        Decorated function that retries on transient failures.
    """
    if retryable_exceptions is None:
        retryable_exceptions = _DEFAULT_RETRYABLE

    def decorator(fn: Callable) -> Callable:
        @wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            for attempt in range(1, max_attempts + 1):
                try:
                    return fn(*args, **kwargs)
                except retryable_exceptions as exc:
                    if attempt == max_attempts:
                        aj_logger.error(
                            f"All {max_attempts} attempts failed for {fn.__qualname__}: {exc}"
                        )
                        raise
                    delay = backoff_delay(attempt, base_delay, max_delay, backoff_factor)
                    aj_logger.warning(
                        f"Attempt {attempt}/{max_attempts} for {fn.__qualname__} failed "
                        f"({exc}), retrying in {delay:.2f}s"
                    )
                    time.sleep(delay)
            raise AssertionError("unreachable")

        return wrapper

    return decorator
