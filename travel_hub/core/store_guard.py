"""
Timeout and connectivity guard for backing-store calls.

Every service method that touches the database goes through `store_call`, so
callers see `RequestTimeoutError` or `NetworkError` instead of raw driver
exceptions.
"""

import asyncio
import functools
import logging
from typing import Any, Awaitable, Callable, TypeVar

from sqlalchemy.exc import DisconnectionError, InterfaceError, OperationalError

from travel_hub.config import get_settings
from travel_hub.core.exceptions import NetworkError, RequestTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_CONNECTIVITY_ERRORS = (OperationalError, InterfaceError, DisconnectionError, ConnectionError)


async def run_store_call(
    operation: str,
    call: Callable[..., Awaitable[T]],
    *args: Any,
    timeout_seconds: float | None = None,
    **kwargs: Any,
) -> T:
    """Await `call` under the store timeout, translating failures."""
    if timeout_seconds is None:
        timeout_seconds = get_settings().coordination.request_timeout_seconds
    try:
        return await asyncio.wait_for(call(*args, **kwargs), timeout=timeout_seconds)
    except asyncio.TimeoutError:
        logger.warning(
            f"Store call '{operation}' timed out",
            extra={"operation": operation, "timeout_seconds": timeout_seconds},
        )
        raise RequestTimeoutError(operation, timeout_seconds)
    except _CONNECTIVITY_ERRORS as e:
        logger.error(
            f"Store call '{operation}' failed: {type(e).__name__}",
            extra={"operation": operation, "exception_type": type(e).__name__},
        )
        raise NetworkError(operation) from e


def store_call(operation: str) -> Callable:
    """Decorator form of `run_store_call` for async service methods."""

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            return await run_store_call(operation, func, *args, **kwargs)

        return wrapper

    return decorator
