"""Decorators for moving expensive key derivation off the calling thread.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from functools import wraps
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

from seckey.common.config import Config

logger = logging.getLogger(__name__)

_executor: ThreadPoolExecutor | None = None
_executor_lock = threading.Lock()


def _get_executor() -> ThreadPoolExecutor:
    global _executor  # noqa: PLW0603
    with _executor_lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(
                max_workers=Config().BACKGROUND_WORKERS,
                thread_name_prefix="seckey",
            )
        return _executor


def run_in_background(
    func: Callable | None = None,
    *,
    executor: ThreadPoolExecutor | None = None,
) -> Callable:
    """Decorator that runs the wrapped function on a worker thread.

    Args:
        func: Function to wrap
        executor: Executor to submit to, defaults to a shared pool sized by
            Config.BACKGROUND_WORKERS

    Returns:
        Decorated function returning a concurrent.futures.Future. Exceptions
        raised by the function are re-raised by Future.result().
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Future:
            pool = executor or _get_executor()
            logger.debug("Submitting %s to background pool", func.__name__)
            return pool.submit(func, *args, **kwargs)

        return wrapper

    if func is not None:
        return decorator(func)
    return decorator
