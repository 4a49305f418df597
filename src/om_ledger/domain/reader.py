"""Ledger reader Protocol: the read side of the contract.

The concrete reader (RPC client, indexer, test fake) lives outside this
repository. Implementations raise LedgerReadError for transport failures and
return None for data the ledger does not have yet.
"""

from typing import Protocol

from src.om_ledger.domain.models import LedgerConstants
from src.om_resolution.domain.models import (
    Jury,
    JurorStake,
    Market,
    ResolutionRecord,
    SharesBalance,
)


class LedgerReaderProtocol(Protocol):
    async def get_market_info(self, market_id: int) -> Market | None: ...

    async def get_resolution_info(self, market_id: int) -> ResolutionRecord | None: ...

    async def get_jury(self, market_id: int) -> Jury | None: ...

    async def get_blocks_since_dispute(self, market_id: int) -> int | None: ...

    async def get_shares_balance(self, market_id: int, account: str) -> SharesBalance | None: ...

    async def get_juror_stake(self, account: str) -> JurorStake | None: ...

    async def get_token_balance(self, account: str) -> int | None: ...

    async def get_constants(self) -> LedgerConstants: ...
