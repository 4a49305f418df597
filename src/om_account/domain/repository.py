"""Store Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from typing import Protocol

from src.om_account.domain.models import AccountFlags


class AccountStateStoreProtocol(Protocol):
    async def get_flags(self, market_id: int, account: str) -> AccountFlags: ...

    async def mark_voted(self, market_id: int, account: str) -> AccountFlags: ...

    async def mark_proposer_claimed(self, market_id: int, account: str) -> AccountFlags: ...

    async def is_market_expired(self, market_id: int) -> bool: ...

    async def mark_market_expired(self, market_id: int) -> None: ...
