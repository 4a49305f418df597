"""Domain models for om_resolution: frozen snapshots of ledger state.

The ledger creates and mutates every entity; the client only holds
immutable copies. Fields that may not have loaded yet are Optional so the
phase resolver can answer INDETERMINATE instead of guessing.
"""

from dataclasses import dataclass

from src.om_common.enums import MarketOutcome, ResolutionStatus

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
JURY_SIZE = 10


def same_address(a: str | None, b: str | None) -> bool:
    """Case-insensitive address comparison; the zero address matches nothing."""
    if not a or not b:
        return False
    if a.lower() == ZERO_ADDRESS or b.lower() == ZERO_ADDRESS:
        return False
    return a.lower() == b.lower()


@dataclass(frozen=True)
class Market:
    question: str
    option_a: str
    option_b: str
    end_time: int | None
    outcome: MarketOutcome = MarketOutcome.UNRESOLVED
    total_option_a_shares: int = 0
    total_option_b_shares: int = 0
    resolved: bool = False
    fees_for_creator: int = 0

    @property
    def total_shares(self) -> int:
        return self.total_option_a_shares + self.total_option_b_shares


@dataclass(frozen=True)
class ResolutionRecord:
    status: ResolutionStatus | None
    proposer: str | None = None
    proposed_outcome: MarketOutcome = MarketOutcome.UNRESOLVED
    disputer: str | None = None
    disputed_outcome: MarketOutcome = MarketOutcome.UNRESOLVED
    dispute_window_end: int | None = None
    voting_end: int | None = None
    votes_for_proposer: int = 0
    votes_for_disputer: int = 0


@dataclass(frozen=True)
class SharesBalance:
    option_a_shares: int = 0
    option_b_shares: int = 0

    @property
    def total(self) -> int:
        return self.option_a_shares + self.option_b_shares

    def for_outcome(self, outcome: MarketOutcome) -> int:
        if outcome == MarketOutcome.OPTION_A:
            return self.option_a_shares
        if outcome == MarketOutcome.OPTION_B:
            return self.option_b_shares
        return 0


@dataclass(frozen=True)
class JurorStake:
    stake: int = 0
    unlock_time: int = 0  # meaningless while stake == 0

    @property
    def is_staked(self) -> bool:
        return self.stake > 0


@dataclass(frozen=True)
class Jury:
    """The ten drawn jurors. Before the draw the ledger returns zero addresses."""

    members: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.members and len(self.members) != JURY_SIZE:
            raise ValueError(f"Jury must have {JURY_SIZE} members, got {len(self.members)}")

    def contains(self, account: str | None) -> bool:
        return any(same_address(m, account) for m in self.members)


@dataclass(frozen=True)
class MarketSnapshot:
    """Independently fetched reads for one market, possibly moments apart."""

    market_id: int
    market: Market | None = None
    resolution: ResolutionRecord | None = None
    jury: Jury | None = None
    blocks_since_dispute: int | None = None
    fetched_at: int | None = None


@dataclass(frozen=True)
class AccountSnapshot:
    """Account-scoped reads: shares on one market plus wallet-wide values."""

    account: str
    shares: SharesBalance | None = None
    juror_stake: JurorStake | None = None
    token_balance: int | None = None
