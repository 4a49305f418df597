"""FastAPI dependency that hands routers a Redis-backed account state store."""

from src.om_account.infrastructure.redis_store import RedisAccountStateStore
from src.om_common.redis_client import get_redis


async def get_account_store() -> RedisAccountStateStore:
    return RedisAccountStateStore(await get_redis())
