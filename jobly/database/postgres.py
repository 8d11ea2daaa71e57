import logging
from typing import Optional

import asyncpg

from ..config import get_database_uri, DB_POOL_MIN_SIZE, DB_POOL_MAX_SIZE

log = logging.getLogger(__name__)

_pool: Optional[asyncpg.Pool] = None


async def connect(dsn: Optional[str] = None) -> asyncpg.Pool:
    """Open the shared pool (idempotent)."""
    global _pool
    if _pool is None:
        dsn = dsn or get_database_uri()
        _pool = await asyncpg.create_pool(
            dsn,
            min_size=DB_POOL_MIN_SIZE,
            max_size=DB_POOL_MAX_SIZE,
        )
        log.info("Database pool open (min=%s, max=%s)", DB_POOL_MIN_SIZE, DB_POOL_MAX_SIZE)
    return _pool


async def close() -> None:
    global _pool
    if _pool is not None:
        await _pool.close()
        _pool = None
        log.info("Database pool closed")


def get_db() -> asyncpg.Pool:
    """
    FastAPI dependency. Models only use fetch/fetchrow, so anything with
    that surface (a pool, a connection, a test double) can stand in.
    """
    if _pool is None:
        raise RuntimeError("Database pool is not open; call connect() first")
    return _pool
