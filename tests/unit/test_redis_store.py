"""Unit tests for RedisAccountStateStore using a mock Redis client."""

from unittest.mock import AsyncMock

import pytest

from src.om_account.infrastructure.redis_store import RedisAccountStateStore


@pytest.fixture
def redis() -> AsyncMock:
    return AsyncMock()


class TestFlags:
    async def test_empty_hash_means_no_flags(self, redis: AsyncMock) -> None:
        redis.hgetall.return_value = {}
        flags = await RedisAccountStateStore(redis).get_flags(7, "0xABC")
        assert flags.account == "0xabc"
        assert flags.has_voted is False
        assert flags.proposer_claimed is False
        redis.hgetall.assert_awaited_once_with("account_state:7:0xabc")

    async def test_mark_voted(self, redis: AsyncMock) -> None:
        redis.hgetall.return_value = {"has_voted": "1"}
        flags = await RedisAccountStateStore(redis).mark_voted(7, "0xABC")
        redis.hset.assert_awaited_once_with("account_state:7:0xabc", "has_voted", "1")
        assert flags.has_voted is True

    async def test_mark_proposer_claimed(self, redis: AsyncMock) -> None:
        redis.hgetall.return_value = {"has_voted": "1", "proposer_claimed": "1"}
        flags = await RedisAccountStateStore(redis).mark_proposer_claimed(7, "0xabc")
        redis.hset.assert_awaited_once_with("account_state:7:0xabc", "proposer_claimed", "1")
        assert flags.proposer_claimed is True
        assert flags.has_voted is True


class TestMarketExpiry:
    async def test_not_expired(self, redis: AsyncMock) -> None:
        redis.get.return_value = None
        assert await RedisAccountStateStore(redis).is_market_expired(3) is False
        redis.get.assert_awaited_once_with("market_expired:3")

    async def test_expired(self, redis: AsyncMock) -> None:
        redis.get.return_value = "1"
        assert await RedisAccountStateStore(redis).is_market_expired(3) is True

    async def test_mark_expired(self, redis: AsyncMock) -> None:
        await RedisAccountStateStore(redis).mark_market_expired(3)
        redis.set.assert_awaited_once_with("market_expired:3", "1")
