"""MarketView — one pass of the decision core over a snapshot.

Pure composition: timing oracle, phase resolver, action gate, vote tally and
settlement calculator all run on the same inputs, so every consumer sees one
consistent answer for a given poll.
"""

from dataclasses import dataclass, field

from src.om_account.domain.models import AccountFlags
from src.om_common.enums import Action, DenialReason, MarketOutcome, Phase, TieBreak, ViewerRole
from src.om_common.errors import TieUnresolvedError
from src.om_gate.domain.gate import explain_account_actions, explain_actions
from src.om_gate.domain.models import AccountState, ActionContext, derive_roles
from src.om_gate.rules.oracle import counter_outcomes
from src.om_ledger.domain.models import LedgerConstants
from src.om_market.domain.display import participation as bettor_participation
from src.om_resolution.domain.models import AccountSnapshot, MarketSnapshot
from src.om_resolution.domain.phase import is_hidden, resolve_phase
from src.om_settlement.domain.claims import Claim, claims_for
from src.om_settlement.domain.payout import projected_winnings
from src.om_tally.domain.tally import TallyResult, tally
from src.om_timing.domain.oracle import DeadlineStatus, evaluate_deadlines

_TALLY_PHASES = frozenset({Phase.JURY_VOTING, Phase.READY_TO_FINALIZE_DISPUTE})


@dataclass(frozen=True)
class MarketView:
    market_id: int
    phase: Phase
    hidden: bool
    roles: frozenset[ViewerRole]
    deadlines: dict[str, DeadlineStatus]
    denials: dict[Action, DenialReason | None]
    account_denials: dict[Action, DenialReason | None] = field(default_factory=dict)
    claims: list[Claim] = field(default_factory=list)
    tally: TallyResult | None = None
    counter_outcomes: tuple[MarketOutcome, ...] = ()
    projected_winnings: dict[MarketOutcome, int] = field(default_factory=dict)
    participation: str | None = None  # "winner" / "loser" once finalized

    @property
    def legal_actions(self) -> frozenset[Action]:
        return frozenset(a for a, reason in self.denials.items() if reason is None)

    @property
    def account_actions(self) -> frozenset[Action]:
        return frozenset(a for a, reason in self.account_denials.items() if reason is None)


def build_account_state(
    snapshot: MarketSnapshot,
    account_snapshot: AccountSnapshot | None,
    flags: AccountFlags | None,
) -> AccountState:
    """Unloaded reads stay None so the gate defers instead of seeing zero."""
    if account_snapshot is None:
        return AccountState(account=None)
    return AccountState(
        account=account_snapshot.account,
        roles=derive_roles(
            account_snapshot.account, snapshot.resolution, snapshot.jury, account_snapshot.shares
        ),
        shares=account_snapshot.shares,
        token_balance=account_snapshot.token_balance,
        juror_stake=account_snapshot.juror_stake,
        has_voted=flags.has_voted if flags else False,
        proposer_claimed=flags.proposer_claimed if flags else False,
    )


def build_market_view(
    snapshot: MarketSnapshot,
    account_snapshot: AccountSnapshot | None,
    flags: AccountFlags | None,
    constants: LedgerConstants,
    now: int,
    jury_expired: bool | None,
    tie_break: TieBreak = TieBreak.PROPOSER,
) -> MarketView:
    market, resolution = snapshot.market, snapshot.resolution
    phase = resolve_phase(market, resolution, now, jury_expired)
    state = build_account_state(snapshot, account_snapshot, flags)
    ctx = ActionContext(
        now=now,
        market=market,
        resolution=resolution,
        constants=constants,
        jury_expired=bool(jury_expired),
        tie_break=tie_break,
    )

    stake = state.juror_stake
    deadlines = evaluate_deadlines(
        {
            "end_time": market.end_time if market else None,
            "dispute_window_end": resolution.dispute_window_end if resolution else None,
            "voting_end": resolution.voting_end if resolution else None,
            "unlock_time": stake.unlock_time if stake is not None and stake.is_staked else None,
        },
        now,
    )

    result: TallyResult | None = None
    if phase in _TALLY_PHASES and resolution is not None:
        try:
            result = tally(
                resolution.votes_for_proposer,
                resolution.votes_for_disputer,
                resolution.proposed_outcome,
                resolution.disputed_outcome,
                tie_break,
            )
        except TieUnresolvedError:
            result = None

    projected: dict[MarketOutcome, int] = {}
    shares = state.shares
    if market is not None and phase != Phase.FINALIZED and shares is not None and shares.total > 0:
        projected = projected_winnings(market, shares)

    return MarketView(
        market_id=snapshot.market_id,
        phase=phase,
        hidden=is_hidden(phase),
        roles=state.roles,
        deadlines=deadlines,
        denials=explain_actions(phase, state, ctx),
        account_denials=explain_account_actions(state, ctx),
        claims=claims_for(phase, state, ctx),
        tally=result,
        counter_outcomes=(
            counter_outcomes(resolution.proposed_outcome)
            if phase == Phase.DISPUTE_WINDOW and resolution is not None
            else ()
        ),
        projected_winnings=projected,
        participation=(
            bettor_participation(market, account_snapshot.shares)
            if market is not None and account_snapshot is not None and phase == Phase.FINALIZED
            else None
        ),
    )
