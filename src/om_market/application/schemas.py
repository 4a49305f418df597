"""Pydantic schemas for om_market API requests and responses.

Requests carry raw ledger fields exactly as the contract returns them
(uint8 status/outcome codes, uint256 amounts and timestamps). Every block is
optional except the constants: a missing block means "not loaded yet" and
yields phase INDETERMINATE rather than a validation error.
"""

from pydantic import BaseModel, Field

from src.om_common.datetime_utils import ts_to_datetime
from src.om_common.enums import Action, MarketOutcome, ResolutionStatus
from src.om_common.units import units_to_display
from src.om_ledger.domain.models import LedgerConstants
from src.om_market.domain.display import (
    chance_percentage,
    format_volume,
    option_percentages,
    outcome_label,
)
from src.om_market.domain.view import MarketView
from src.om_resolution.domain.models import (
    JURY_SIZE,
    AccountSnapshot,
    Jury,
    JurorStake,
    Market,
    MarketSnapshot,
    ResolutionRecord,
    SharesBalance,
)
from src.om_timing.domain.oracle import DeadlineStatus, format_countdown, remaining_label

# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class MarketIn(BaseModel):
    question: str
    option_a: str
    option_b: str
    end_time: int | None = Field(None, ge=0)
    outcome: int = Field(0, ge=0, le=3)
    total_option_a_shares: int = Field(0, ge=0)
    total_option_b_shares: int = Field(0, ge=0)
    resolved: bool = False
    fees_for_creator: int = Field(0, ge=0)

    def to_domain(self) -> Market:
        return Market(
            question=self.question,
            option_a=self.option_a,
            option_b=self.option_b,
            end_time=self.end_time,
            outcome=MarketOutcome(self.outcome),
            total_option_a_shares=self.total_option_a_shares,
            total_option_b_shares=self.total_option_b_shares,
            resolved=self.resolved,
            fees_for_creator=self.fees_for_creator,
        )


class ResolutionIn(BaseModel):
    status: int | None = Field(None, ge=0, le=5)
    proposer: str | None = None
    proposed_outcome: int = Field(0, ge=0, le=3)
    disputer: str | None = None
    disputed_outcome: int = Field(0, ge=0, le=3)
    dispute_window_end: int | None = Field(None, ge=0)
    voting_end: int | None = Field(None, ge=0)
    votes_for_proposer: int = Field(0, ge=0, le=JURY_SIZE)
    votes_for_disputer: int = Field(0, ge=0, le=JURY_SIZE)

    def to_domain(self) -> ResolutionRecord:
        return ResolutionRecord(
            status=ResolutionStatus(self.status) if self.status is not None else None,
            proposer=self.proposer,
            proposed_outcome=MarketOutcome(self.proposed_outcome),
            disputer=self.disputer,
            disputed_outcome=MarketOutcome(self.disputed_outcome),
            dispute_window_end=self.dispute_window_end,
            voting_end=self.voting_end,
            votes_for_proposer=self.votes_for_proposer,
            votes_for_disputer=self.votes_for_disputer,
        )


class AccountIn(BaseModel):
    account: str = Field(..., min_length=1)
    option_a_shares: int | None = Field(None, ge=0)
    option_b_shares: int | None = Field(None, ge=0)
    token_balance: int | None = Field(None, ge=0)
    juror_stake: int | None = Field(None, ge=0)
    unlock_time: int = Field(0, ge=0)

    def to_domain(self) -> AccountSnapshot:
        shares = None
        if self.option_a_shares is not None or self.option_b_shares is not None:
            shares = SharesBalance(self.option_a_shares or 0, self.option_b_shares or 0)
        stake = None
        if self.juror_stake is not None:
            stake = JurorStake(self.juror_stake, self.unlock_time)
        return AccountSnapshot(
            account=self.account,
            shares=shares,
            juror_stake=stake,
            token_balance=self.token_balance,
        )


class ConstantsIn(BaseModel):
    proposal_bond_amount: int = Field(..., ge=0)
    market_creation_stake_amount: int = Field(..., ge=0)
    min_juror_stake: int = Field(..., ge=0)

    def to_domain(self) -> LedgerConstants:
        return LedgerConstants(
            proposal_bond_amount=self.proposal_bond_amount,
            market_creation_stake_amount=self.market_creation_stake_amount,
            min_juror_stake=self.min_juror_stake,
        )


class EvaluateRequest(BaseModel):
    market_id: int = Field(..., ge=0)
    market: MarketIn | None = None
    resolution: ResolutionIn | None = None
    jury: list[str] | None = Field(None, min_length=JURY_SIZE, max_length=JURY_SIZE)
    blocks_since_dispute: int | None = Field(None, ge=0)
    account: AccountIn | None = None
    constants: ConstantsIn
    now: int | None = Field(None, ge=0, description="Unix seconds; server clock when omitted")

    def to_snapshot(self) -> MarketSnapshot:
        return MarketSnapshot(
            market_id=self.market_id,
            market=self.market.to_domain() if self.market else None,
            resolution=self.resolution.to_domain() if self.resolution else None,
            jury=Jury(tuple(self.jury)) if self.jury is not None else None,
            blocks_since_dispute=self.blocks_since_dispute,
        )

    def to_account_snapshot(self) -> AccountSnapshot | None:
        return self.account.to_domain() if self.account else None


class CheckActionRequest(EvaluateRequest):
    action: Action
    outcome: int | None = Field(None, ge=0, le=3)

    def outcome_domain(self) -> MarketOutcome | None:
        return MarketOutcome(self.outcome) if self.outcome is not None else None


class JuryDrawFailureRequest(BaseModel):
    message: str = Field(..., min_length=1, description="Revert message from the ledger")


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class DeadlineOut(BaseModel):
    deadline: int
    deadline_at: str
    has_passed: bool
    remaining_seconds: int
    label: str
    in_countdown: bool
    countdown: str | None  # MM:SS, only in the final 30 minutes

    @classmethod
    def from_domain(cls, status: DeadlineStatus) -> "DeadlineOut":
        return cls(
            deadline=status.deadline,
            deadline_at=ts_to_datetime(status.deadline).isoformat(),
            has_passed=status.has_passed,
            remaining_seconds=status.remaining,
            label=remaining_label(status),
            in_countdown=status.in_countdown,
            countdown=format_countdown(status.remaining) if status.in_countdown else None,
        )


class ClaimOut(BaseModel):
    kind: str
    action: str
    amount: int
    amount_display: str


class TallyOut(BaseModel):
    votes_for_proposer: int
    votes_for_disputer: int
    winner: str | None
    outcome: int
    outcome_label: str
    is_tie: bool


class MarketViewOut(BaseModel):
    market_id: int
    phase: str
    hidden: bool
    roles: list[str]
    legal_actions: list[str]
    denials: dict[str, str | None]
    account_actions: list[str]
    account_denials: dict[str, str | None]
    deadlines: dict[str, DeadlineOut]
    claims: list[ClaimOut]
    tally: TallyOut | None
    counter_outcomes: list[int]
    projected_winnings: dict[str, int]
    chance_percentage: int | None
    option_percentages: list[int] | None
    volume_display: str | None
    participation: str | None

    @classmethod
    def from_domain(
        cls, view: MarketView, market: Market | None, decimals: int
    ) -> "MarketViewOut":
        option_a = market.option_a if market else "Option A"
        option_b = market.option_b if market else "Option B"
        total_a = market.total_option_a_shares if market else 0
        total_b = market.total_option_b_shares if market else 0
        tally_out = None
        if view.tally is not None:
            tally_out = TallyOut(
                votes_for_proposer=view.tally.votes_for_proposer,
                votes_for_disputer=view.tally.votes_for_disputer,
                winner=view.tally.winner.value if view.tally.winner else None,
                outcome=view.tally.outcome.value,
                outcome_label=outcome_label(view.tally.outcome, option_a, option_b),
                is_tie=view.tally.is_tie,
            )
        return cls(
            market_id=view.market_id,
            phase=view.phase.value,
            hidden=view.hidden,
            roles=sorted(r.value for r in view.roles),
            legal_actions=sorted(a.value for a in view.legal_actions),
            denials={a.value: (r.value if r else None) for a, r in view.denials.items()},
            account_actions=sorted(a.value for a in view.account_actions),
            account_denials={
                a.value: (r.value if r else None) for a, r in view.account_denials.items()
            },
            deadlines={k: DeadlineOut.from_domain(v) for k, v in view.deadlines.items()},
            claims=[
                ClaimOut(
                    kind=c.kind.value,
                    action=c.action.value,
                    amount=c.amount,
                    amount_display=units_to_display(c.amount, decimals),
                )
                for c in view.claims
            ],
            tally=tally_out,
            counter_outcomes=[o.value for o in view.counter_outcomes],
            projected_winnings={o.name: amt for o, amt in view.projected_winnings.items()},
            chance_percentage=chance_percentage(total_a, total_b) if market else None,
            option_percentages=list(option_percentages(total_a, total_b)) if market else None,
            volume_display=format_volume(market.total_shares, decimals) if market else None,
            participation=view.participation,
        )


class ActionCheckOut(BaseModel):
    action: str
    allowed: bool
