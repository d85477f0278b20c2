"""Postgres connection pool for the relational todo store.

Smoke check:
  - Without DATABASE_URL: start the app, POST /api/todos, then GET /api/todos/{id}.
  - With DATABASE_URL set: POST /api/todos, restart the server, then GET /api/todos/{id}.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import asyncpg

logger = logging.getLogger(__name__)

_pool: Optional[asyncpg.Pool] = None

TODOS_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS todos (
    id BIGSERIAL PRIMARY KEY,
    title TEXT NOT NULL,
    is_complete BOOLEAN NOT NULL DEFAULT FALSE
);
"""


def is_enabled() -> bool:
    return _pool is not None


async def init_db(database_url: str, *, min_size: int = 1, max_size: int = 5) -> None:
    global _pool

    if _pool is not None:
        return

    _pool = await asyncpg.create_pool(dsn=database_url, min_size=min_size, max_size=max_size)
    async with _pool.acquire() as conn:
        await conn.execute(TODOS_TABLE_DDL)
    logger.info("Database initialized for todo persistence")


async def close_db() -> None:
    global _pool

    if _pool is None:
        return

    await _pool.close()
    _pool = None
    logger.info("Database pool closed")


@asynccontextmanager
async def acquire() -> AsyncIterator[asyncpg.Connection]:
    """Yield one pooled connection, released when the block exits."""
    if _pool is None:
        raise RuntimeError("Database pool is not initialized")
    async with _pool.acquire() as conn:
        yield conn
