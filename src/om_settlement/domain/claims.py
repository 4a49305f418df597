"""Claimable amounts for one account, one entry per independent claim."""

from dataclasses import dataclass

from src.om_common.enums import Action, ClaimKind, Phase
from src.om_gate.domain.gate import deny_reason
from src.om_gate.domain.models import AccountState, ActionContext
from src.om_settlement.domain.payout import (
    bettor_payout,
    calculate_proposer_settlement,
    unlockable_stake,
)


@dataclass(frozen=True)
class Claim:
    kind: ClaimKind
    action: Action
    amount: int  # smallest units; 0 for an accepted slash


def claims_for(phase: Phase, state: AccountState, ctx: ActionContext) -> list[Claim]:
    """Every claim the gate currently allows, with its exact amount.

    Order carries no meaning; the ledger settles each claim separately.
    """
    claims: list[Claim] = []

    stake = state.juror_stake
    if stake is not None and deny_reason(Action.UNSTAKE_FROM_JURY, phase, state, ctx) is None:
        claims.append(Claim(
            ClaimKind.JUROR_STAKE, Action.UNSTAKE_FROM_JURY, unlockable_stake(stake, ctx.now)
        ))

    market = ctx.market
    if market is None:
        return claims

    if deny_reason(Action.CLAIM_PROPOSER_REWARDS, phase, state, ctx) is None:
        claims.append(Claim(
            ClaimKind.PROPOSER_REWARDS,
            Action.CLAIM_PROPOSER_REWARDS,
            calculate_proposer_settlement(
                market.outcome, ctx.constants.proposal_bond_amount, market.fees_for_creator
            ),
        ))
    shares = state.shares
    if shares is None:
        return claims
    if deny_reason(Action.CLAIM_WINNINGS, phase, state, ctx) is None:
        claims.append(Claim(
            ClaimKind.WINNINGS, Action.CLAIM_WINNINGS, bettor_payout(market, shares)
        ))
    if deny_reason(Action.CLAIM_REFUND, phase, state, ctx) is None:
        claims.append(Claim(
            ClaimKind.REFUND, Action.CLAIM_REFUND, bettor_payout(market, shares)
        ))
    return claims
