"""Unit tests for SnapshotPoller using a mock ledger reader."""

from unittest.mock import AsyncMock, patch

import pytest

from src.om_common.enums import ResolutionStatus
from src.om_common.errors import LedgerReadError
from src.om_ledger.application.poller import SnapshotPoller
from src.om_ledger.domain.models import LedgerConstants
from src.om_resolution.domain.models import (
    JurorStake,
    Market,
    ResolutionRecord,
    SharesBalance,
)

MARKET = Market(question="Q", option_a="Yes", option_b="No", end_time=1_000)
RESOLUTION = ResolutionRecord(status=ResolutionStatus.PENDING)


@pytest.fixture
def reader() -> AsyncMock:
    mock = AsyncMock()
    mock.get_market_info.return_value = MARKET
    mock.get_resolution_info.return_value = RESOLUTION
    mock.get_jury.return_value = None
    mock.get_blocks_since_dispute.return_value = None
    mock.get_shares_balance.return_value = SharesBalance(5, 0)
    mock.get_juror_stake.return_value = JurorStake()
    mock.get_token_balance.return_value = 42
    return mock


class TestFetch:
    async def test_fetch_market(self, reader: AsyncMock) -> None:
        poller = SnapshotPoller(reader, interval_seconds=0, clock=lambda: 123)
        snapshot = await poller.fetch_market(9)
        assert snapshot.market == MARKET
        assert snapshot.resolution == RESOLUTION
        assert snapshot.fetched_at == 123
        reader.get_market_info.assert_awaited_once_with(9)

    async def test_failed_read_leaves_none(self, reader: AsyncMock) -> None:
        reader.get_resolution_info.side_effect = LedgerReadError("rpc timeout")
        poller = SnapshotPoller(reader, interval_seconds=0)
        snapshot = await poller.fetch_market(9)
        assert snapshot.market == MARKET
        assert snapshot.resolution is None

    async def test_fetch_with_account(self, reader: AsyncMock) -> None:
        poller = SnapshotPoller(reader, interval_seconds=0)
        market_snapshot, account_snapshot = await poller.fetch(9, "0xabc")
        assert market_snapshot.market_id == 9
        assert account_snapshot is not None
        assert account_snapshot.shares == SharesBalance(5, 0)
        assert account_snapshot.token_balance == 42
        reader.get_shares_balance.assert_awaited_once_with(9, "0xabc")

    async def test_fetch_without_account(self, reader: AsyncMock) -> None:
        poller = SnapshotPoller(reader, interval_seconds=0)
        _, account_snapshot = await poller.fetch(9, None)
        assert account_snapshot is None
        reader.get_token_balance.assert_not_awaited()

    async def test_other_errors_propagate(self, reader: AsyncMock) -> None:
        reader.get_jury.side_effect = RuntimeError("bug")
        poller = SnapshotPoller(reader, interval_seconds=0)
        with pytest.raises(RuntimeError):
            await poller.fetch_market(9)


class TestPoll:
    async def test_poll_stops_after_max_polls(self, reader: AsyncMock) -> None:
        handler = AsyncMock()
        poller = SnapshotPoller(reader, interval_seconds=3.0)
        with patch("src.om_ledger.application.poller.asyncio.sleep", new=AsyncMock()) as sleep:
            await poller.poll(9, None, handler, max_polls=3)
        assert handler.await_count == 3
        assert sleep.await_count == 2
        sleep.assert_awaited_with(3.0)


class TestFetchConstants:
    async def test_constants(self, reader: AsyncMock) -> None:
        constants = LedgerConstants(100, 500, 50)
        reader.get_constants.return_value = constants
        poller = SnapshotPoller(reader, interval_seconds=0)
        assert await poller.fetch_constants() == constants

    async def test_constants_failure_propagates(self, reader: AsyncMock) -> None:
        reader.get_constants.side_effect = LedgerReadError("rpc down")
        poller = SnapshotPoller(reader, interval_seconds=0)
        with pytest.raises(LedgerReadError):
            await poller.fetch_constants()
