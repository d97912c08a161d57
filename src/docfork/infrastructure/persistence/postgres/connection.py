"""PostgreSQL async connection pool."""

import psycopg
from psycopg_pool import AsyncConnectionPool

from docfork.domain.exceptions import StoreError


def create_pool(conninfo: str, min_size: int = 1, max_size: int = 10) -> AsyncConnectionPool:
    """Create async connection pool.

    Pool is created with open=False. Caller must call await pool.open()
    before use (e.g. via PoolLifespanMiddleware in ASGI lifespan).
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        open=False,
    )


async def check_pool(pool: AsyncConnectionPool) -> bool:
    """Readiness probe: run a trivial query on a pooled connection."""
    try:
        async with pool.connection(timeout=5.0) as conn:
            await conn.execute("SELECT 1")
    except psycopg.Error as e:
        raise StoreError(str(e)) from e
    return True
