"""Jury steps: draw, vote, finalize dispute, stake and unstake."""

from src.om_common.enums import (
    Action,
    DenialReason,
    MarketOutcome,
    Phase,
    TieBreak,
    ViewerRole,
)
from src.om_common.errors import ActionNotAllowedError
from src.om_gate.domain.models import AccountState, ActionContext
from src.om_gate.rules.preconditions import (
    require_account,
    require_after,
    require_balance,
    require_before,
    require_loaded,
    require_phase,
    require_role,
)
from src.om_settlement.domain.payout import can_unlock_juror_stake


def check_fetch_jury(
    phase: Phase, state: AccountState, ctx: ActionContext, outcome: MarketOutcome | None = None
) -> None:
    action = Action.FETCH_JURY
    require_account(action, state)
    if phase == Phase.EXPIRED or ctx.jury_expired:
        raise ActionNotAllowedError(action, DenialReason.JURY_EXPIRED)
    require_phase(action, phase, Phase.AWAITING_JURY)


def check_submit_vote(
    phase: Phase, state: AccountState, ctx: ActionContext, outcome: MarketOutcome | None = None
) -> None:
    action = Action.SUBMIT_VOTE
    require_account(action, state)
    require_phase(action, phase, Phase.JURY_VOTING)
    require_role(action, state, ViewerRole.JUROR)
    if state.has_voted:
        raise ActionNotAllowedError(action, DenialReason.ALREADY_VOTED)
    resolution = ctx.resolution
    require_before(action, ctx.now, resolution.voting_end if resolution else None)
    if outcome is not None and (
        resolution is None
        or outcome not in (resolution.proposed_outcome, resolution.disputed_outcome)
    ):
        raise ActionNotAllowedError(action, DenialReason.INVALID_OUTCOME_CHOICE, outcome.name)


def check_finalize_dispute(
    phase: Phase, state: AccountState, ctx: ActionContext, outcome: MarketOutcome | None = None
) -> None:
    action = Action.FINALIZE_DISPUTE
    require_account(action, state)
    require_phase(action, phase, Phase.READY_TO_FINALIZE_DISPUTE)
    resolution = ctx.resolution
    require_after(action, ctx.now, resolution.voting_end if resolution else None)
    if (
        ctx.tie_break == TieBreak.REJECT
        and resolution is not None
        and resolution.votes_for_proposer == resolution.votes_for_disputer
    ):
        raise ActionNotAllowedError(action, DenialReason.TIE_UNRESOLVED)


def check_stake_for_jury(state: AccountState, ctx: ActionContext) -> None:
    """Wallet-level: the juror pool is shared by every market."""
    action = Action.STAKE_FOR_JURY
    require_account(action, state)
    if require_loaded(action, state.juror_stake, "juror stake").is_staked:
        raise ActionNotAllowedError(action, DenialReason.ALREADY_STAKED)
    require_balance(action, state.token_balance, ctx.constants.min_juror_stake)


def check_unstake_from_jury(
    phase: Phase, state: AccountState, ctx: ActionContext, outcome: MarketOutcome | None = None
) -> None:
    action = Action.UNSTAKE_FROM_JURY
    require_account(action, state)
    stake = require_loaded(action, state.juror_stake, "juror stake")
    if not stake.is_staked:
        raise ActionNotAllowedError(action, DenialReason.NOTHING_TO_CLAIM, "no juror stake")
    if not can_unlock_juror_stake(stake, ctx.now):
        raise ActionNotAllowedError(
            action, DenialReason.STAKE_LOCKED, f"unlocks at {stake.unlock_time}"
        )
