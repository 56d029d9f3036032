#!/usr/bin/env python
"""
Create every table directly from the models. Handy for local SQLite
databases; use Alembic migrations anywhere else.
"""

# Standard library imports
import asyncio
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Third-party imports
from sqlalchemy import inspect

# Local application imports
from smartmunic.core.db.create_async_engine import async_engine

# Import all models to register them with Base
from smartmunic.models import Base


async def create_tables() -> None:
    print("Creating database tables...")

    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        table_names = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

    await async_engine.dispose()

    print("Tables:")
    for name in sorted(table_names):
        print(f"  - {name}")


if __name__ == "__main__":
    asyncio.run(create_tables())
