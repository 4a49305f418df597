"""Shared redis.asyncio pool for the account state store.

Ledger snapshots are never cached in Redis; every poll re-reads the ledger.
Only client-side facts (votes cast, bonds claimed, expired juries) live here.
"""

import logging

import redis.asyncio as aioredis

from config.settings import settings

logger = logging.getLogger(__name__)

_pool: aioredis.Redis | None = None


async def get_redis() -> aioredis.Redis:
    """Return the process-wide client, creating it on first use."""
    global _pool  # noqa: PLW0603
    if _pool is None:
        _pool = aioredis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            health_check_interval=30,
        )
    return _pool


async def ping_redis() -> None:
    """Fail fast at startup if the store is unreachable."""
    client = await get_redis()
    await client.ping()
    logger.info("Redis reachable at %s", settings.REDIS_URL.rsplit("@", 1)[-1])


async def close_redis() -> None:
    global _pool  # noqa: PLW0603
    if _pool is not None:
        await _pool.aclose()
        _pool = None
