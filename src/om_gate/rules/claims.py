"""Claims on a finalized market.

Each claim is judged on its own: an account that both proposed and bet gets
two independent verdicts, settled separately by the ledger.
"""

from src.om_common.enums import Action, DenialReason, MarketOutcome, Phase, ViewerRole
from src.om_common.errors import ActionNotAllowedError
from src.om_gate.domain.models import AccountState, ActionContext
from src.om_gate.rules.preconditions import (
    require_account,
    require_loaded,
    require_phase,
    require_role,
)


def _final_outcome(action: Action, phase: Phase, ctx: ActionContext) -> MarketOutcome:
    require_phase(action, phase, Phase.FINALIZED)
    if ctx.market is None or ctx.market.outcome == MarketOutcome.UNRESOLVED:
        # market info lagging behind the resolution record
        raise ActionNotAllowedError(action, DenialReason.WRONG_PHASE, "outcome not yet visible")
    return ctx.market.outcome


def check_claim_winnings(
    phase: Phase, state: AccountState, ctx: ActionContext, outcome: MarketOutcome | None = None
) -> None:
    action = Action.CLAIM_WINNINGS
    require_account(action, state)
    final = _final_outcome(action, phase, ctx)
    if final == MarketOutcome.INVALID:
        raise ActionNotAllowedError(action, DenialReason.WRONG_PHASE, "market resolved INVALID")
    shares = require_loaded(action, state.shares, "shares")
    if shares.for_outcome(final) <= 0:
        raise ActionNotAllowedError(action, DenialReason.NOTHING_TO_CLAIM)


def check_claim_refund(
    phase: Phase, state: AccountState, ctx: ActionContext, outcome: MarketOutcome | None = None
) -> None:
    action = Action.CLAIM_REFUND
    require_account(action, state)
    final = _final_outcome(action, phase, ctx)
    if final != MarketOutcome.INVALID:
        raise ActionNotAllowedError(action, DenialReason.WRONG_PHASE, "market has a winner")
    shares = require_loaded(action, state.shares, "shares")
    if shares.total <= 0:
        raise ActionNotAllowedError(action, DenialReason.NOTHING_TO_CLAIM)


def check_claim_proposer_rewards(
    phase: Phase, state: AccountState, ctx: ActionContext, outcome: MarketOutcome | None = None
) -> None:
    """Offered on INVALID too: the proposer then acknowledges the slashed bond."""
    action = Action.CLAIM_PROPOSER_REWARDS
    require_account(action, state)
    _final_outcome(action, phase, ctx)
    require_role(action, state, ViewerRole.PROPOSER)
    if state.proposer_claimed:
        raise ActionNotAllowedError(action, DenialReason.ALREADY_CLAIMED)
