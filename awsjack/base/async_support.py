"""
asyncio support for Awsjack.

Besides the executor-based ``<op>_callable`` and ``<op>_async`` forms, every
client operation gets an awaitable ``a<op>`` variant. It runs the
synchronous form in a worker thread via :func:`asyncio.to_thread`, so
service calls can be awaited without blocking the event loop while the
canonical implementation stays synchronous.

Usage::

    outcome = await eks.adescribe_cluster(DescribeClusterRequest(name="prod"))
"""

from __future__ import annotations

import asyncio
import functools
from typing import Any, Callable, Coroutine, TypeVar

T = TypeVar("T")


def async_wrap(
    fn: Callable[..., T],
    name: str | None = None,
) -> Callable[..., Coroutine[Any, Any, T]]:
    """Return an async version of *fn* that runs it in a thread.

    The wrapper preserves the original function's docstring.

    Args:
        fn: A synchronous callable to wrap.
        name: ``__name__`` for the wrapper; defaults to ``a<fn.__name__>``.

    Returns:
        An async callable with the same parameters and return type.
    """

    @functools.wraps(fn)
    async def _wrapper(*args: Any, **kwargs: Any) -> T:
        return await asyncio.to_thread(fn, *args, **kwargs)

    _wrapper.__name__ = name or f"a{fn.__name__}"
    _wrapper.__qualname__ = _wrapper.__name__
    return _wrapper
