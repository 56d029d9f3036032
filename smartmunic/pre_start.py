"""
Pre-start script: wait until the database accepts connections before the
API or workers boot.
"""

# Standard library imports
import asyncio
import sys

# Third-party imports
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

# Local application imports
from smartmunic.core.db import async_engine
from smartmunic.core.monitoring.logging import get_logger

logger = get_logger(__name__)


async def check_database() -> bool:
    """Check if database is accessible and ready."""
    try:
        async with async_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"Database connection failed: {e}")
        return False

    logger.info("Database is ready")
    return True


async def wait_for_database(max_retries: int = 30, retry_interval: int = 2) -> bool:
    """
    Wait for database to be ready.

    Args:
        max_retries: Maximum number of connection attempts
        retry_interval: Seconds between retries
    """
    for attempt in range(1, max_retries + 1):
        logger.info(f"Database connection attempt {attempt}/{max_retries}")

        if await check_database():
            return True

        if attempt < max_retries:
            await asyncio.sleep(retry_interval)

    logger.error(f"Failed to connect to database after {max_retries} attempts")
    return False


async def main() -> None:
    ready = await wait_for_database()
    await async_engine.dispose()
    if not ready:
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
