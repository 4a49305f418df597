"""Tests for om_timing.domain.oracle."""

import pytest

from src.om_timing.domain.oracle import (
    JURY_BLOCKHASH_WINDOW,
    blocks_elapsed,
    breakdown,
    deadline_status,
    evaluate_deadlines,
    format_countdown,
    is_jury_expiry_rejection,
    is_jury_selection_expired,
    remaining_label,
)


class TestDeadlineStatus:
    def test_before_deadline(self) -> None:
        status = deadline_status(deadline=1_000, now=400)
        assert status.has_passed is False
        assert status.remaining == 600

    def test_exactly_at_deadline_has_passed(self) -> None:
        status = deadline_status(deadline=1_000, now=1_000)
        assert status.has_passed is True
        assert status.remaining == 0

    def test_after_deadline_remaining_clamped(self) -> None:
        status = deadline_status(deadline=1_000, now=5_000)
        assert status.has_passed is True
        assert status.remaining == 0

    def test_in_countdown_final_thirty_minutes(self) -> None:
        assert deadline_status(10_000, 10_000 - 1_800).in_countdown is True
        assert deadline_status(10_000, 10_000 - 1_801).in_countdown is False
        assert deadline_status(10_000, 10_000).in_countdown is False

    def test_evaluate_deadlines_skips_unknown(self) -> None:
        result = evaluate_deadlines({"end_time": 100, "voting_end": None}, now=50)
        assert set(result) == {"end_time"}
        assert result["end_time"].remaining == 50


class TestBreakdown:
    def test_days_and_hours(self) -> None:
        b = breakdown(2 * 86_400 + 3 * 3_600 + 59)
        assert (b.days, b.hours, b.minutes, b.seconds) == (2, 3, 0, 59)
        assert b.label() == "2d 3h"

    def test_hours_and_minutes(self) -> None:
        assert breakdown(4 * 3_600 + 10 * 60).label() == "4h 10m"

    def test_minutes_and_seconds(self) -> None:
        assert breakdown(14 * 60 + 5).label() == "14m 5s"

    def test_seconds_only(self) -> None:
        assert breakdown(5).label() == "5s"

    def test_negative_is_zero(self) -> None:
        assert breakdown(-10).label() == "0s"

    def test_remaining_label_ended(self) -> None:
        assert remaining_label(deadline_status(100, 200)) == "Ended"
        assert remaining_label(deadline_status(100, 200), "Closed") == "Closed"

    def test_remaining_label_open(self) -> None:
        assert remaining_label(deadline_status(400, 100)) == "5m 0s"


class TestCountdown:
    def test_format(self) -> None:
        assert format_countdown(1_805) == "30:05"
        assert format_countdown(59) == "00:59"

    def test_negative_clamped(self) -> None:
        assert format_countdown(-3) == "00:00"


class TestJuryExpiry:
    def test_boundary(self) -> None:
        assert is_jury_selection_expired(JURY_BLOCKHASH_WINDOW) is False
        assert is_jury_selection_expired(JURY_BLOCKHASH_WINDOW + 1) is True

    def test_zero_blocks(self) -> None:
        assert is_jury_selection_expired(0) is False

    def test_monotonic(self) -> None:
        seen_expired = False
        for blocks in range(0, 600):
            expired = is_jury_selection_expired(blocks)
            assert not (seen_expired and not expired)
            seen_expired = seen_expired or expired

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError):
            is_jury_selection_expired(-1)

    def test_blocks_elapsed_clamps_lagging_node(self) -> None:
        assert blocks_elapsed(dispute_block=1_000, current_block=1_300) == 300
        assert blocks_elapsed(dispute_block=1_000, current_block=990) == 0

    def test_rejection_message_detection(self) -> None:
        assert is_jury_expiry_rejection("execution reverted: Blockhash not available") is True
        assert is_jury_expiry_rejection("seed older than 256 blocks") is True
        assert is_jury_expiry_rejection("execution reverted: Not enough jurors") is False
