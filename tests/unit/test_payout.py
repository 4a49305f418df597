"""Tests for om_settlement.domain.payout: integer settlement arithmetic."""

import pytest

from src.om_common.enums import MarketOutcome
from src.om_common.errors import AppError
from src.om_resolution.domain.models import JurorStake, Market, SharesBalance
from src.om_settlement.domain.payout import (
    bettor_payout,
    calculate_proposer_settlement,
    calculate_refund,
    calculate_winnings,
    can_unlock_juror_stake,
    projected_winnings,
    unlockable_stake,
    winning_pools,
)


def _market(outcome: MarketOutcome, a: int, b: int, fees: int = 0) -> Market:
    return Market(
        question="Q", option_a="Yes", option_b="No", end_time=1_000, outcome=outcome,
        total_option_a_shares=a, total_option_b_shares=b, resolved=True, fees_for_creator=fees,
    )


class TestCalculateWinnings:
    def test_sole_winner_takes_loser_pool(self) -> None:
        assert calculate_winnings(1_000_000, 1_000_000, 500_000) == 1_500_000

    def test_equal_holders_paid_equally(self) -> None:
        first = calculate_winnings(500_000, 1_000_000, 500_000)
        second = calculate_winnings(500_000, 1_000_000, 500_000)
        assert first == second == 750_000

    def test_empty_winner_pool_pays_zero(self) -> None:
        assert calculate_winnings(0, 0, 500_000) == 0

    def test_no_loser_pool_returns_principal(self) -> None:
        assert calculate_winnings(300, 1_000, 0) == 300

    def test_floor_division(self) -> None:
        # 1/3 of the pool: proportion 333_333, bonus floor(100 * 333_333 / 1e6) = 33
        assert calculate_winnings(1, 3, 100) == 1 + 33

    def test_never_exceeds_pool(self) -> None:
        w, total, loser = 999_999, 1_000_000, 7_777_777
        assert calculate_winnings(w, total, loser) <= total + loser

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError):
            calculate_winnings(-1, 10, 10)

    def test_float_rejected(self) -> None:
        with pytest.raises(ValueError):
            calculate_winnings(1.5, 10, 10)  # type: ignore[arg-type]


class TestRefund:
    def test_refund_is_principal(self) -> None:
        assert calculate_refund(SharesBalance(300, 200)) == 500

    def test_invalid_market_pays_refund(self) -> None:
        market = _market(MarketOutcome.INVALID, 1_000, 2_000)
        assert bettor_payout(market, SharesBalance(300, 200)) == 500


class TestProposerSettlement:
    def test_bond_plus_fees(self) -> None:
        assert calculate_proposer_settlement(MarketOutcome.OPTION_A, 100, 25) == 125

    def test_invalid_slashes_bond(self) -> None:
        assert calculate_proposer_settlement(MarketOutcome.INVALID, 100, 25) == 0

    def test_unresolved_raises(self) -> None:
        with pytest.raises(AppError) as exc_info:
            calculate_proposer_settlement(MarketOutcome.UNRESOLVED, 100, 25)
        assert exc_info.value.code == 3001


class TestPools:
    def test_option_b_wins(self) -> None:
        market = _market(MarketOutcome.OPTION_B, 400, 600)
        assert winning_pools(market) == (600, 400)
        assert bettor_payout(market, SharesBalance(0, 600)) == 1_000

    def test_loser_paid_nothing(self) -> None:
        market = _market(MarketOutcome.OPTION_A, 1_000_000, 500_000)
        assert bettor_payout(market, SharesBalance(0, 500_000)) == 0

    def test_unresolved_has_no_pools(self) -> None:
        with pytest.raises(AppError):
            winning_pools(_market(MarketOutcome.UNRESOLVED, 1, 1))

    def test_projected_winnings_per_option(self) -> None:
        market = _market(MarketOutcome.UNRESOLVED, 1_000_000, 500_000)
        projected = projected_winnings(market, SharesBalance(500_000, 250_000))
        assert projected == {
            MarketOutcome.OPTION_A: 750_000,
            MarketOutcome.OPTION_B: 250_000 + 500_000,
        }


class TestJurorStake:
    def test_unlock_at_exact_time(self) -> None:
        stake = JurorStake(stake=50, unlock_time=1_000)
        assert can_unlock_juror_stake(stake, 999) is False
        assert can_unlock_juror_stake(stake, 1_000) is True

    def test_unlockable_amount(self) -> None:
        stake = JurorStake(stake=50, unlock_time=1_000)
        assert unlockable_stake(stake, 999) == 0
        assert unlockable_stake(stake, 2_000) == 50

    def test_no_stake_never_unlocks(self) -> None:
        assert can_unlock_juror_stake(JurorStake(), 10**9) is False
