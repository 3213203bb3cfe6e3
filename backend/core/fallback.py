"""
Degrade-to-fallback decorator for external adapter calls.

Every call that crosses a provider boundary (embedding, completion,
translation, language detection, vector search) is wrapped so that a
failure becomes a logged fallback value instead of an exception. There
are no retries.

Dependencies: functools, logging
System role: Single failure policy for all external collaborators
"""

import functools
import logging
from typing import Any, Awaitable, Callable, TypeVar

from backend.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

T = TypeVar("T")


def degrade(
    fallback: Callable[..., T],
    operation: str | None = None,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """
    Wrap an async callable so any exception yields ``fallback(*args, **kwargs)``.

    The fallback receives exactly the arguments of the failed call, so it
    can derive its value from them (e.g. return the untranslated text).

    Args:
        fallback: Callable producing the substitute value
        operation: Name used in the degradation log line

    Returns:
        Decorator for async functions and methods

    Usage:
        @degrade(lambda self, text, *a, **kw: text, operation="translate")
        async def translate(self, text, source, target): ...
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        op_name = operation or func.__qualname__

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                log_with_context(
                    logger,
                    logging.WARNING,
                    f"{__name__}:degrade - {op_name} failed, using fallback: {type(e).__name__}: {e}",
                    operation=op_name,
                    error_type=type(e).__name__,
                )
                return fallback(*args, **kwargs)

        return wrapper

    return decorator
