"""Optimistic oracle steps: propose, dispute, finalize undisputed.

Disputes post the same bond as proposals (proposal_bond_amount).
"""

from src.om_common.enums import Action, DenialReason, MarketOutcome, Phase, ViewerRole
from src.om_common.errors import ActionNotAllowedError
from src.om_gate.domain.models import AccountState, ActionContext
from src.om_gate.rules.preconditions import (
    require_account,
    require_after,
    require_balance,
    require_before,
    require_phase,
)

PROPOSABLE_OUTCOMES: tuple[MarketOutcome, ...] = (
    MarketOutcome.OPTION_A,
    MarketOutcome.OPTION_B,
    MarketOutcome.INVALID,
)


def counter_outcomes(proposed: MarketOutcome) -> tuple[MarketOutcome, ...]:
    """Outcomes a disputer may put forward against `proposed`."""
    return tuple(o for o in PROPOSABLE_OUTCOMES if o != proposed)


def check_propose_outcome(
    phase: Phase, state: AccountState, ctx: ActionContext, outcome: MarketOutcome | None = None
) -> None:
    action = Action.PROPOSE_OUTCOME
    require_account(action, state)
    require_phase(action, phase, Phase.AWAITING_PROPOSAL)
    if outcome is not None and outcome not in PROPOSABLE_OUTCOMES:
        raise ActionNotAllowedError(action, DenialReason.INVALID_OUTCOME_CHOICE, outcome.name)
    require_balance(action, state.token_balance, ctx.constants.proposal_bond_amount)


def check_dispute_outcome(
    phase: Phase, state: AccountState, ctx: ActionContext, outcome: MarketOutcome | None = None
) -> None:
    action = Action.DISPUTE_OUTCOME
    require_account(action, state)
    require_phase(action, phase, Phase.DISPUTE_WINDOW)
    if state.has_role(ViewerRole.PROPOSER):
        raise ActionNotAllowedError(action, DenialReason.ROLE_MISMATCH, "proposer cannot dispute")
    resolution = ctx.resolution
    require_before(action, ctx.now, resolution.dispute_window_end if resolution else None)
    if outcome is not None and (
        resolution is None or outcome not in counter_outcomes(resolution.proposed_outcome)
    ):
        raise ActionNotAllowedError(action, DenialReason.INVALID_OUTCOME_CHOICE, outcome.name)
    require_balance(action, state.token_balance, ctx.constants.proposal_bond_amount)


def check_finalize_undisputed(
    phase: Phase, state: AccountState, ctx: ActionContext, outcome: MarketOutcome | None = None
) -> None:
    action = Action.FINALIZE_UNDISPUTED
    require_account(action, state)
    require_phase(action, phase, Phase.READY_TO_FINALIZE_UNDISPUTED)
    require_after(action, ctx.now, ctx.resolution.dispute_window_end if ctx.resolution else None)
