# Standard library imports
from collections.abc import Awaitable, Callable
from typing import Any

# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.core.db.get_async_session import AsyncSessionLocal


async def run_with_new_session(
    func: Callable[..., Awaitable[Any]],
    *args: Any,
    **kwargs: Any,
) -> Any:
    """
    Run a service function with a fresh database session.

    Used by Celery tasks and start-up hooks, which live outside the
    request/response cycle and therefore have no injected session.

    Args:
        func: Coroutine function accepting an AsyncSession as its first argument.
        *args: Positional arguments forwarded to ``func``.
        **kwargs: Keyword arguments forwarded to ``func``.

    Returns:
        Any: Whatever ``func`` returns.
    """
    session: AsyncSession
    async with AsyncSessionLocal() as session:
        return await func(session, *args, **kwargs)
