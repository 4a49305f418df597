"""Tests for om_market.application.schemas."""

import pytest
from pydantic import ValidationError

from src.om_common.enums import MarketOutcome, Phase, ResolutionStatus
from src.om_market.application.schemas import (
    CheckActionRequest,
    DeadlineOut,
    EvaluateRequest,
    MarketViewOut,
)
from src.om_market.domain.view import MarketView
from src.om_resolution.domain.models import Market
from src.om_timing.domain.oracle import deadline_status

CONSTANTS = {"proposal_bond_amount": 1, "market_creation_stake_amount": 1, "min_juror_stake": 1}


class TestEvaluateRequest:
    def test_minimal_request_is_all_unknown(self) -> None:
        req = EvaluateRequest(market_id=1, constants=CONSTANTS)
        snapshot = req.to_snapshot()
        assert snapshot.market is None
        assert snapshot.resolution is None
        assert snapshot.jury is None
        assert req.to_account_snapshot() is None

    def test_converts_codes_to_enums(self) -> None:
        req = EvaluateRequest(
            market_id=1,
            market={"question": "Q", "option_a": "A", "option_b": "B", "end_time": 5,
                    "outcome": 3},
            resolution={"status": 5, "proposed_outcome": 3},
            constants=CONSTANTS,
        )
        snapshot = req.to_snapshot()
        assert snapshot.market.outcome == MarketOutcome.INVALID
        assert snapshot.resolution.status == ResolutionStatus.FINALIZED

    def test_status_none_is_kept(self) -> None:
        req = EvaluateRequest(market_id=1, resolution={}, constants=CONSTANTS)
        assert req.to_snapshot().resolution.status is None

    def test_shares_absent_when_not_sent(self) -> None:
        req = EvaluateRequest(market_id=1, account={"account": "0xa"}, constants=CONSTANTS)
        assert req.to_account_snapshot().shares is None

    def test_juror_stake_absent_when_not_sent(self) -> None:
        req = EvaluateRequest(market_id=1, account={"account": "0xa"}, constants=CONSTANTS)
        assert req.to_account_snapshot().juror_stake is None

    def test_juror_stake_with_unlock_time(self) -> None:
        req = EvaluateRequest(
            market_id=1, account={"account": "0xa", "juror_stake": 0}, constants=CONSTANTS
        )
        stake = req.to_account_snapshot().juror_stake
        assert stake is not None
        assert stake.is_staked is False

    def test_unknown_status_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EvaluateRequest(market_id=1, resolution={"status": 6}, constants=CONSTANTS)

    def test_jury_must_have_ten_members(self) -> None:
        with pytest.raises(ValidationError):
            EvaluateRequest(market_id=1, jury=["0xa"] * 9, constants=CONSTANTS)

    def test_votes_bounded_by_jury_size(self) -> None:
        with pytest.raises(ValidationError):
            EvaluateRequest(
                market_id=1, resolution={"votes_for_proposer": 11}, constants=CONSTANTS
            )

    def test_negative_amount_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EvaluateRequest(
                market_id=1, account={"account": "0xa", "token_balance": -1},
                constants=CONSTANTS,
            )

    def test_check_request_outcome(self) -> None:
        req = CheckActionRequest(
            market_id=1, constants=CONSTANTS, action="SUBMIT_VOTE", outcome=2
        )
        assert req.outcome_domain() == MarketOutcome.OPTION_B

    def test_check_request_unknown_action(self) -> None:
        with pytest.raises(ValidationError):
            CheckActionRequest(market_id=1, constants=CONSTANTS, action="SELL_SHARES")


class TestResponses:
    def test_deadline_out(self) -> None:
        out = DeadlineOut.from_domain(deadline_status(1_000, 400))
        assert out.label == "10m 0s"
        assert out.in_countdown is True
        assert out.countdown == "10:00"
        assert out.has_passed is False
        assert out.deadline_at == "1970-01-01T00:16:40+00:00"

    def test_deadline_out_far_away_has_no_countdown(self) -> None:
        out = DeadlineOut.from_domain(deadline_status(10_000, 0))
        assert out.in_countdown is False
        assert out.countdown is None

    def test_market_view_out_without_market(self) -> None:
        view = MarketView(
            market_id=1, phase=Phase.INDETERMINATE, hidden=False, roles=frozenset(),
            deadlines={}, denials={},
        )
        out = MarketViewOut.from_domain(view, None, 6)
        assert out.phase == "INDETERMINATE"
        assert out.account_actions == []
        assert out.account_denials == {}
        assert out.chance_percentage is None
        assert out.option_percentages is None
        assert out.volume_display is None
        assert out.participation is None

    def test_market_view_out_display(self) -> None:
        market = Market(
            question="Q", option_a="Yes", option_b="No", end_time=0,
            total_option_a_shares=3_000_000, total_option_b_shares=1_000_000,
        )
        view = MarketView(
            market_id=1, phase=Phase.TRADING_OPEN, hidden=False, roles=frozenset(),
            deadlines={}, denials={},
            projected_winnings={MarketOutcome.OPTION_A: 4_000_000},
        )
        out = MarketViewOut.from_domain(view, market, 6)
        assert out.chance_percentage == 75
        assert out.option_percentages == [75, 25]
        assert out.volume_display == "4.00"
        assert out.projected_winnings == {"OPTION_A": 4_000_000}
