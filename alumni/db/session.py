import logging
from typing import AsyncGenerator, Optional

import asyncpg
from asyncpg import Connection
from asyncpg.pool import Pool

from alumni.core.config import settings

logger = logging.getLogger(__name__)

db_pool: Optional[Pool] = None


async def connect_db_pool() -> Pool:
    """Create the shared asyncpg pool once; later calls return the same pool."""
    global db_pool
    if db_pool is not None:
        return db_pool
    try:
        db_pool = await asyncpg.create_pool(
            dsn=settings.asyncpg_url,
            min_size=settings.DB_POOL_MIN_SIZE,
            max_size=settings.DB_POOL_MAX_SIZE,
            command_timeout=settings.DB_COMMAND_TIMEOUT,
            timeout=30,
        )
    except (OSError, asyncpg.PostgresError) as e:
        logger.error("Cannot reach %s:%s/%s: %s", settings.DB_HOST, settings.DB_PORT, settings.DB_NAME, e)
        raise
    logger.info("Database pool ready for %s (size %s-%s)",
                settings.DB_NAME, settings.DB_POOL_MIN_SIZE, settings.DB_POOL_MAX_SIZE)
    return db_pool


async def close_db_pool():
    global db_pool
    if db_pool is None:
        return
    await db_pool.close()
    db_pool = None
    logger.info("Database pool closed")


async def get_db_connection() -> AsyncGenerator[Connection, None]:
    """Request-scoped connection; released back to the pool after the response."""
    if db_pool is None:
        raise RuntimeError("Database pool is not initialized; was the app started without its lifespan?")
    async with db_pool.acquire() as connection:
        yield connection
