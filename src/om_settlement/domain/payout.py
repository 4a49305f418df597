"""Settlement arithmetic: integer only.

All amounts are int in the token's smallest unit and every division is
floor division. Float ratios belong to om_market.domain.display and must
never flow back into these functions.

Winners split the losing pool in proportion to their share of the winning
pool. The proportion is carried at PRECISION_SCALE so a holder's fraction
survives integer math:

    proportion = winning_shares * SCALE // winner_pool_total
    bonus      = loser_pool_total * proportion // SCALE
    payout     = winning_shares + bonus
"""

from src.om_common.enums import MarketOutcome
from src.om_common.errors import OutcomeNotWinnableError
from src.om_common.units import validate_amount
from src.om_resolution.domain.models import JurorStake, Market, SharesBalance

PRECISION_SCALE = 1_000_000


def calculate_winnings(
    winning_shares: int, winner_pool_total: int, loser_pool_total: int
) -> int:
    """Payout for one holder of the winning option. Zero pool pays zero."""
    validate_amount(winning_shares)
    validate_amount(winner_pool_total)
    validate_amount(loser_pool_total)
    if winner_pool_total == 0:
        return 0
    proportion = winning_shares * PRECISION_SCALE // winner_pool_total
    bonus = loser_pool_total * proportion // PRECISION_SCALE
    return winning_shares + bonus


def calculate_refund(shares: SharesBalance) -> int:
    """INVALID markets return full principal; no side won, nothing is redistributed."""
    validate_amount(shares.option_a_shares)
    validate_amount(shares.option_b_shares)
    return shares.option_a_shares + shares.option_b_shares


def calculate_proposer_settlement(
    outcome: MarketOutcome, bond_amount: int, fees_for_creator: int
) -> int:
    """Bond plus creator fees, or 0 when the market finalized INVALID (bond slashed)."""
    validate_amount(bond_amount)
    validate_amount(fees_for_creator)
    if outcome == MarketOutcome.INVALID:
        return 0
    if outcome == MarketOutcome.UNRESOLVED:
        raise OutcomeNotWinnableError(outcome.value)
    return bond_amount + fees_for_creator


def winning_pools(market: Market) -> tuple[int, int]:
    """(winner_pool_total, loser_pool_total) for a market won by A or B."""
    if market.outcome == MarketOutcome.OPTION_A:
        return market.total_option_a_shares, market.total_option_b_shares
    if market.outcome == MarketOutcome.OPTION_B:
        return market.total_option_b_shares, market.total_option_a_shares
    raise OutcomeNotWinnableError(market.outcome.value)


def bettor_payout(market: Market, shares: SharesBalance) -> int:
    """What one account's shares redeem for on a finalized market."""
    if market.outcome == MarketOutcome.INVALID:
        return calculate_refund(shares)
    winner_total, loser_total = winning_pools(market)
    return calculate_winnings(shares.for_outcome(market.outcome), winner_total, loser_total)


def projected_winnings(market: Market, shares: SharesBalance) -> dict[MarketOutcome, int]:
    """Payout per option if that option were to win, from current pool totals."""
    return {
        MarketOutcome.OPTION_A: calculate_winnings(
            shares.option_a_shares, market.total_option_a_shares, market.total_option_b_shares
        ),
        MarketOutcome.OPTION_B: calculate_winnings(
            shares.option_b_shares, market.total_option_b_shares, market.total_option_a_shares
        ),
    }


def can_unlock_juror_stake(stake: JurorStake, now: int) -> bool:
    return stake.stake > 0 and now >= stake.unlock_time


def unlockable_stake(stake: JurorStake, now: int) -> int:
    """The recorded stake once unlocked, else 0. No other computation applies."""
    return stake.stake if can_unlock_juror_stake(stake, now) else 0
