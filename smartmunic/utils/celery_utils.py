# Standard library imports
import asyncio
from collections.abc import Awaitable, Callable
import functools
from typing import Any, TypeVar

# Local application imports
from smartmunic.core.db import async_engine

T = TypeVar("T")


def celery_async_task(func: Callable[..., Awaitable[T]]) -> Callable[..., T]:
    """
    Let a Celery task body be a coroutine.

    Workers call tasks from plain threads with no running loop, so every
    invocation gets its own loop via ``asyncio.run``. Stack it under
    ``@celery_app.task``::

        @celery_app.task(bind=True)
        @celery_async_task
        async def sweep(self): ...
    """

    async def run_and_release(*args: Any, **kwargs: Any) -> T:
        try:
            return await func(*args, **kwargs)
        finally:
            # Pooled connections are bound to this loop, which closes on return
            await async_engine.dispose()

    @functools.wraps(func)
    def run(*args: Any, **kwargs: Any) -> T:
        return asyncio.run(run_and_release(*args, **kwargs))

    return run
