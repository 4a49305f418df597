"""Pydantic schemas for om_account API responses."""

from pydantic import BaseModel

from src.om_account.domain.models import AccountFlags


class AccountFlagsResponse(BaseModel):
    market_id: int
    account: str
    has_voted: bool
    proposer_claimed: bool
    market_expired: bool

    @classmethod
    def from_domain(cls, flags: AccountFlags, market_expired: bool) -> "AccountFlagsResponse":
        return cls(
            market_id=flags.market_id,
            account=flags.account,
            has_voted=flags.has_voted,
            proposer_claimed=flags.proposer_claimed,
            market_expired=market_expired,
        )
