"""RedisAccountStateStore — concrete implementation of AccountStateStoreProtocol.

Key layout:
  account_state:{market_id}:{account_lower}   HASH  has_voted / proposer_claimed -> "1"
  market_expired:{market_id}                  STRING "1"

No TTL: flags describe facts that never become false again (a cast vote, a
claimed bond, an unreachable jury seed). Writes are HSET/SET of "1" only,
so repeated writes are idempotent.
"""

import logging

import redis.asyncio as aioredis

from src.om_account.domain.models import AccountFlags

logger = logging.getLogger(__name__)

_HAS_VOTED = "has_voted"
_PROPOSER_CLAIMED = "proposer_claimed"


def _account_key(market_id: int, account: str) -> str:
    return f"account_state:{market_id}:{account.lower()}"


def _expired_key(market_id: int) -> str:
    return f"market_expired:{market_id}"


class RedisAccountStateStore:
    def __init__(self, redis: aioredis.Redis) -> None:
        self._redis = redis

    async def get_flags(self, market_id: int, account: str) -> AccountFlags:
        raw = await self._redis.hgetall(_account_key(market_id, account))
        return AccountFlags(
            market_id=market_id,
            account=account.lower(),
            has_voted=raw.get(_HAS_VOTED) == "1",
            proposer_claimed=raw.get(_PROPOSER_CLAIMED) == "1",
        )

    async def mark_voted(self, market_id: int, account: str) -> AccountFlags:
        await self._redis.hset(_account_key(market_id, account), _HAS_VOTED, "1")
        logger.info("Recorded vote: market=%d account=%s", market_id, account.lower())
        return await self.get_flags(market_id, account)

    async def mark_proposer_claimed(self, market_id: int, account: str) -> AccountFlags:
        await self._redis.hset(_account_key(market_id, account), _PROPOSER_CLAIMED, "1")
        logger.info("Recorded proposer claim: market=%d account=%s", market_id, account.lower())
        return await self.get_flags(market_id, account)

    async def is_market_expired(self, market_id: int) -> bool:
        return await self._redis.get(_expired_key(market_id)) == "1"

    async def mark_market_expired(self, market_id: int) -> None:
        await self._redis.set(_expired_key(market_id), "1")
        logger.warning("Market %d flagged expired: jury seed unavailable", market_id)
