"""SnapshotPoller — the caller that feeds the decision core.

Reads for one market are issued concurrently and assembled into a
MarketSnapshot. A read that fails with LedgerReadError leaves its field as
None; the phase resolver then reports INDETERMINATE until the next poll
fills it in. Polling stops when the task running `poll()` is cancelled.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from config.settings import settings
from src.om_common.datetime_utils import now_ts
from src.om_common.errors import LedgerReadError
from src.om_ledger.domain.models import LedgerConstants
from src.om_ledger.domain.reader import LedgerReaderProtocol
from src.om_resolution.domain.models import AccountSnapshot, MarketSnapshot

logger = logging.getLogger(__name__)

T = TypeVar("T")

SnapshotHandler = Callable[[MarketSnapshot, AccountSnapshot | None], Awaitable[None]]


async def _read_or_none(label: str, read: Awaitable[T]) -> T | None:
    try:
        return await read
    except LedgerReadError as e:
        logger.warning("Ledger read %s failed: %s", label, e.message)
        return None


class SnapshotPoller:
    def __init__(
        self,
        reader: LedgerReaderProtocol,
        interval_seconds: float | None = None,
        clock: Callable[[], int] = now_ts,
    ) -> None:
        self._reader = reader
        self._interval = (
            interval_seconds if interval_seconds is not None else settings.POLL_INTERVAL_SECONDS
        )
        self._clock = clock

    async def fetch_market(self, market_id: int) -> MarketSnapshot:
        market, resolution, jury, blocks = await asyncio.gather(
            _read_or_none("market_info", self._reader.get_market_info(market_id)),
            _read_or_none("resolution_info", self._reader.get_resolution_info(market_id)),
            _read_or_none("jury", self._reader.get_jury(market_id)),
            _read_or_none("blocks_since_dispute", self._reader.get_blocks_since_dispute(market_id)),
        )
        return MarketSnapshot(
            market_id=market_id,
            market=market,
            resolution=resolution,
            jury=jury,
            blocks_since_dispute=blocks,
            fetched_at=self._clock(),
        )

    async def fetch_constants(self) -> LedgerConstants:
        """Global bond and stake amounts. Unlike per-market reads, a failure propagates."""
        return await self._reader.get_constants()

    async def fetch_account(self, market_id: int, account: str) -> AccountSnapshot:
        shares, stake, balance = await asyncio.gather(
            _read_or_none("shares_balance", self._reader.get_shares_balance(market_id, account)),
            _read_or_none("juror_stake", self._reader.get_juror_stake(account)),
            _read_or_none("token_balance", self._reader.get_token_balance(account)),
        )
        return AccountSnapshot(
            account=account, shares=shares, juror_stake=stake, token_balance=balance
        )

    async def fetch(
        self, market_id: int, account: str | None
    ) -> tuple[MarketSnapshot, AccountSnapshot | None]:
        reads: list[Awaitable[Any]] = [self.fetch_market(market_id)]
        if account:
            reads.append(self.fetch_account(market_id, account))
        results = await asyncio.gather(*reads)
        return results[0], (results[1] if account else None)

    async def poll(
        self,
        market_id: int,
        account: str | None,
        on_snapshot: SnapshotHandler,
        max_polls: int | None = None,
    ) -> None:
        """Fetch on a fixed interval and hand each snapshot to `on_snapshot`.

        Runs until cancelled, or `max_polls` snapshots when given.
        """
        polls = 0
        logger.info("Polling market %d every %.1fs", market_id, self._interval)
        while max_polls is None or polls < max_polls:
            market_snapshot, account_snapshot = await self.fetch(market_id, account)
            await on_snapshot(market_snapshot, account_snapshot)
            polls += 1
            if max_polls is not None and polls >= max_polls:
                break
            await asyncio.sleep(self._interval)
