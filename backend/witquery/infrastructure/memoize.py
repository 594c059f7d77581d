"""In-flight Call Memoization — concurrent callers with the same key share one task.

Invariants:
    - At most one running task per key per decorated function
    - The entry is removed as soon as the task settles (result or exception)
    - Every awaiting caller sees the same result or the same exception

Design Decisions:
    - Dedupes concurrent loads/saves only; results are not cached after completion
"""

import asyncio
import functools
import logging
from typing import Any, Awaitable, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def memoize_coroutine(
    key_fn: Callable[..., str],
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Decorate an async function so calls with equal keys share one in-flight task."""

    def decorator(fn: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        pending: dict[str, asyncio.Future] = {}

        @functools.wraps(fn)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            key = key_fn(*args, **kwargs)
            task = pending.get(key)
            if task is None:
                task = asyncio.ensure_future(fn(*args, **kwargs))
                pending[key] = task
                task.add_done_callback(lambda _t: pending.pop(key, None))
            else:
                logger.debug(f"Joining in-flight call {key}")
            return await asyncio.shield(task)

        wrapper.pending = pending  # type: ignore[attr-defined]
        return wrapper

    return decorator
