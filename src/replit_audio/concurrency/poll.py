"""Bounded polling for values another process publishes."""

import time
from typing import Callable, Optional, Tuple, Type, TypeVar
from replit_audio.core.exceptions import ConfirmTimeoutError
from replit_audio.utils.log import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def poll_until(
    probe: Callable[[], T],
    timeout: float,
    interval: float = 0.0,
    retry_on: Tuple[Type[BaseException], ...] = (Exception,),
    what: str = "value",
) -> T:
    """
    Call probe until it succeeds or the timeout elapses.

    The first successful call wins. There is no backoff; between attempts
    the thread sleeps for a fixed interval, or spins when interval is 0.
    The probe runs at least once even with a zero timeout.

    Args:
        probe: Function returning the awaited value, raising while it is not available.
        timeout: Maximum seconds to keep polling.
        interval: Fixed sleep between attempts in seconds.
        retry_on: Exception types meaning "not yet available".
        what: Description of the awaited value for the timeout message.

    Returns:
        The first value probe returns.

    Raises:
        ConfirmTimeoutError: If the timeout elapses, chained from the last retried error.
        Exception: Any exception from probe not listed in retry_on.
    """
    start = time.monotonic()
    attempts = 0
    last_error: Optional[BaseException] = None

    while True:
        attempts += 1
        try:
            value = probe()
        except retry_on as e:
            last_error = e
        else:
            logger.debug(f"Found {what} after {attempts} attempts")
            return value

        if time.monotonic() - start > timeout:
            break
        if interval > 0:
            time.sleep(interval)

    logger.warning(f"Timed out after {timeout}s and {attempts} attempts waiting for {what}")
    raise ConfirmTimeoutError(
        f"Timed out after {timeout}s while waiting for {what}",
        timeout=timeout,
    ) from last_error
