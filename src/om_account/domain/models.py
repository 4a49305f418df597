"""Domain models for om_account: client-side flags the ledger does not expose."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AccountFlags:
    """Per-(market, account) flags. Only ever flip from False to True."""

    market_id: int
    account: str
    has_voted: bool = False
    proposer_claimed: bool = False
