# Standard library imports
from collections.abc import Awaitable, Callable
import json
from typing import Any

# Local application imports
from smartmunic.core.caching.redis import redis_client
from smartmunic.core.monitoring.logging import get_contextual_logger
from smartmunic.settings import settings

logger = get_contextual_logger(__name__)

CACHE_KEY_PREFIX = "smartmunic:"


async def get_cached_data(cache_key: str) -> Any | None:
    """Read a JSON value from Redis; cache errors count as a miss."""
    try:
        cached_data = await redis_client.get(CACHE_KEY_PREFIX + cache_key)
        if cached_data:
            return json.loads(cached_data)
        return None
    except Exception as e:
        logger.error(f"Error retrieving {cache_key} from cache: {e}")
        return None


async def set_cached_data(cache_key: str, data: Any, expiry_seconds: int) -> None:
    try:
        await redis_client.set(CACHE_KEY_PREFIX + cache_key, json.dumps(data, default=str), ex=expiry_seconds)
        logger.debug(f"Cached {cache_key} for {expiry_seconds} seconds")
    except Exception as e:
        logger.error(f"Error caching {cache_key}: {e}")


async def cached_stats(cache_key: str, loader: Callable[[], Awaitable[Any]]) -> Any:
    """
    Return the cached JSON form of a statistics payload, computing it with
    ``loader`` on a miss. Bypasses Redis entirely unless STATS_CACHE_ENABLED.

    ``loader`` must return JSON-ready data (dicts and lists, as produced by
    ``model_dump(mode="json")``).
    """
    if not settings.STATS_CACHE_ENABLED:
        return await loader()

    cached = await get_cached_data(cache_key)
    if cached is not None:
        return cached

    data = await loader()
    await set_cached_data(cache_key, data, settings.STATS_CACHE_TTL_SECONDS)
    return data
