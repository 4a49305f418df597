"""Domain models for om_gate: inputs to the action gate.

The gate never looks anything up: roles, balances and per-account flags all
arrive here, filled in by the caller from snapshots and the account state
store.
"""

from dataclasses import dataclass, field

from src.om_common.enums import TieBreak, ViewerRole
from src.om_ledger.domain.models import LedgerConstants
from src.om_resolution.domain.models import (
    Jury,
    JurorStake,
    Market,
    ResolutionRecord,
    SharesBalance,
    same_address,
)


@dataclass(frozen=True)
class AccountState:
    account: str | None
    roles: frozenset[ViewerRole] = frozenset()
    # None means the read has not loaded; the gate then denies with NOT_LOADED
    shares: SharesBalance | None = field(default_factory=SharesBalance)
    token_balance: int | None = 0
    juror_stake: JurorStake | None = field(default_factory=JurorStake)
    has_voted: bool = False
    proposer_claimed: bool = False

    def has_role(self, role: ViewerRole) -> bool:
        return role in self.roles


@dataclass(frozen=True)
class ActionContext:
    """Market-level facts the gate checks preconditions against."""

    now: int
    market: Market | None
    resolution: ResolutionRecord | None
    constants: LedgerConstants
    jury_expired: bool = False
    tie_break: TieBreak = TieBreak.PROPOSER


def derive_roles(
    account: str | None,
    resolution: ResolutionRecord | None,
    jury: Jury | None,
    shares: SharesBalance | None,
) -> frozenset[ViewerRole]:
    """Roles an account holds on one market. Empty when disconnected."""
    if not account:
        return frozenset()
    roles: set[ViewerRole] = set()
    if shares is not None and shares.total > 0:
        roles.add(ViewerRole.BETTOR)
    if resolution is not None:
        if same_address(account, resolution.proposer):
            roles.add(ViewerRole.PROPOSER)
        if same_address(account, resolution.disputer):
            roles.add(ViewerRole.DISPUTER)
    if jury is not None and jury.contains(account):
        roles.add(ViewerRole.JUROR)
    return frozenset(roles)
