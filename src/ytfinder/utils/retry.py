"""Retry logic and the retryable error types used while fetching pages."""

import time
import logging
from functools import wraps
from typing import Callable, Any, Optional

logger = logging.getLogger(__name__)


class RetryableError(Exception):
    """Base class for errors that should trigger retries."""
    pass


class NetworkError(RetryableError):
    """Raised for connection failures and timeouts."""
    pass


class HttpStatusError(RetryableError):
    """Raised when YouTube answers with a non-success status."""

    def __init__(self, status_code: int, url: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        super().__init__(f"HTTP error! status: {status_code}")


class MarkerNotFoundError(RetryableError):
    """Raised when a page does not contain the embedded ytInitialData blob."""
    pass


def retry_with_delay(
    max_attempts: int = 5,
    delay: float = 0.5,
    exceptions: tuple = (RetryableError,)
):
    """Decorator for fixed-interval retry logic.

    The wrapped function is called at most ``max_attempts`` times. Errors
    raised on the last attempt propagate to the caller.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            for attempt in range(max_attempts):
                try:
                    return func(*args, **kwargs)
                except exceptions as e:
                    if attempt == max_attempts - 1:
                        logger.error(f"{e}. Max retries reached.")
                        raise

                    logger.warning(
                        f"{e}. Retrying... ({attempt + 1}/{max_attempts})"
                    )
                    time.sleep(delay)

        return wrapper
    return decorator
