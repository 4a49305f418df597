"""Action gate: which write intents are legal for a viewer right now.

Pure function of (phase, account_state, context). A legal verdict only means
the action was legal at read time; the ledger may still reject it after a
race with another participant.

Market-scoped actions are judged against one market's phase. Wallet-level
actions (joining the juror pool, listing a new market) never appear in a
market's action set; `account_actions` judges them on their own.
"""

from collections.abc import Callable

from src.om_common.enums import Action, DenialReason, MarketOutcome, Phase
from src.om_common.errors import ActionNotAllowedError
from src.om_gate.domain.models import AccountState, ActionContext
from src.om_gate.rules.claims import (
    check_claim_proposer_rewards,
    check_claim_refund,
    check_claim_winnings,
)
from src.om_gate.rules.jury import (
    check_fetch_jury,
    check_finalize_dispute,
    check_stake_for_jury,
    check_submit_vote,
    check_unstake_from_jury,
)
from src.om_gate.rules.oracle import (
    check_dispute_outcome,
    check_finalize_undisputed,
    check_propose_outcome,
)
from src.om_gate.rules.trading import check_buy_shares, check_create_market

Check = Callable[[Phase, AccountState, ActionContext, MarketOutcome | None], None]
AccountCheck = Callable[[AccountState, ActionContext], None]

_MARKET_CHECKS: dict[Action, Check] = {
    Action.BUY_SHARES: check_buy_shares,
    Action.PROPOSE_OUTCOME: check_propose_outcome,
    Action.DISPUTE_OUTCOME: check_dispute_outcome,
    Action.FINALIZE_UNDISPUTED: check_finalize_undisputed,
    Action.FETCH_JURY: check_fetch_jury,
    Action.SUBMIT_VOTE: check_submit_vote,
    Action.FINALIZE_DISPUTE: check_finalize_dispute,
    Action.CLAIM_WINNINGS: check_claim_winnings,
    Action.CLAIM_REFUND: check_claim_refund,
    Action.CLAIM_PROPOSER_REWARDS: check_claim_proposer_rewards,
    Action.UNSTAKE_FROM_JURY: check_unstake_from_jury,
}

_ACCOUNT_CHECKS: dict[Action, AccountCheck] = {
    Action.STAKE_FOR_JURY: check_stake_for_jury,
    Action.CREATE_MARKET: check_create_market,
}

MARKET_ACTIONS: frozenset[Action] = frozenset(_MARKET_CHECKS)
ACCOUNT_ACTIONS: frozenset[Action] = frozenset(_ACCOUNT_CHECKS)


def check_action(
    action: Action,
    phase: Phase,
    state: AccountState,
    ctx: ActionContext,
    outcome: MarketOutcome | None = None,
) -> None:
    """Raise ActionNotAllowedError with a named reason if `action` is illegal.

    `outcome` is the proposed / counter / voted outcome where the action
    takes one; when omitted only the outcome-independent checks run.
    Wallet-level actions ignore `phase` and `outcome`.
    """
    if action in _ACCOUNT_CHECKS:
        _ACCOUNT_CHECKS[action](state, ctx)
        return
    _MARKET_CHECKS[action](phase, state, ctx, outcome)


def deny_reason(
    action: Action,
    phase: Phase,
    state: AccountState,
    ctx: ActionContext,
    outcome: MarketOutcome | None = None,
) -> DenialReason | None:
    try:
        check_action(action, phase, state, ctx, outcome)
    except ActionNotAllowedError as e:
        return e.reason
    return None


def legal_actions(phase: Phase, state: AccountState, ctx: ActionContext) -> frozenset[Action]:
    return frozenset(
        action for action in _MARKET_CHECKS if deny_reason(action, phase, state, ctx) is None
    )


def explain_actions(
    phase: Phase, state: AccountState, ctx: ActionContext
) -> dict[Action, DenialReason | None]:
    """Verdict for every market-scoped action, None meaning legal. For disabled-button hints."""
    return {action: deny_reason(action, phase, state, ctx) for action in _MARKET_CHECKS}


def _account_deny_reason(
    action: Action, state: AccountState, ctx: ActionContext
) -> DenialReason | None:
    try:
        _ACCOUNT_CHECKS[action](state, ctx)
    except ActionNotAllowedError as e:
        return e.reason
    return None


def explain_account_actions(
    state: AccountState, ctx: ActionContext
) -> dict[Action, DenialReason | None]:
    return {action: _account_deny_reason(action, state, ctx) for action in _ACCOUNT_CHECKS}


def account_actions(state: AccountState, ctx: ActionContext) -> frozenset[Action]:
    """Wallet-level actions open to the account, whatever market is on screen."""
    return frozenset(
        action for action, reason in explain_account_actions(state, ctx).items() if reason is None
    )
