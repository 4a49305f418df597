"""AccountStateService — records the facts the ledger cannot be asked about.

The ledger exposes no "has this juror voted" or "has the proposer claimed"
read, so the client records both right after its own transaction succeeds.
"""

from src.om_account.application.schemas import AccountFlagsResponse
from src.om_account.domain.repository import AccountStateStoreProtocol


class AccountStateService:
    def __init__(self, store: AccountStateStoreProtocol) -> None:
        self._store = store

    async def get_flags(self, market_id: int, account: str) -> AccountFlagsResponse:
        flags = await self._store.get_flags(market_id, account)
        expired = await self._store.is_market_expired(market_id)
        return AccountFlagsResponse.from_domain(flags, expired)

    async def record_vote(self, market_id: int, account: str) -> AccountFlagsResponse:
        flags = await self._store.mark_voted(market_id, account)
        expired = await self._store.is_market_expired(market_id)
        return AccountFlagsResponse.from_domain(flags, expired)

    async def record_proposer_claim(self, market_id: int, account: str) -> AccountFlagsResponse:
        flags = await self._store.mark_proposer_claimed(market_id, account)
        expired = await self._store.is_market_expired(market_id)
        return AccountFlagsResponse.from_domain(flags, expired)
