from src.om_common.enums import Action, MarketOutcome, Phase
from src.om_gate.domain.models import AccountState, ActionContext
from src.om_gate.rules.preconditions import (
    require_account,
    require_balance,
    require_before,
    require_phase,
)


def check_buy_shares(
    phase: Phase, state: AccountState, ctx: ActionContext, outcome: MarketOutcome | None = None
) -> None:
    action = Action.BUY_SHARES
    require_account(action, state)
    require_phase(action, phase, Phase.TRADING_OPEN)
    require_before(action, ctx.now, ctx.market.end_time if ctx.market else None)


def check_create_market(state: AccountState, ctx: ActionContext) -> None:
    """Wallet-level: listing a new market locks the creation stake."""
    action = Action.CREATE_MARKET
    require_account(action, state)
    require_balance(action, state.token_balance, ctx.constants.market_creation_stake_amount)
