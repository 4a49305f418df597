"""Timing oracle: pure functions of wall-clock time against ledger deadlines.

All timestamps are unix seconds as stored on the ledger. A deadline has
passed once `now >= deadline`, which is the same comparison the contract
applies when it accepts or rejects a call.

Jury selection reads a recent blockhash as its randomness seed. The EVM only
serves the last 256 block hashes, so once more than 256 blocks have elapsed
since the dispute began the draw can never succeed again.
"""

from collections.abc import Mapping
from dataclasses import dataclass

DISPUTE_PERIOD_SECONDS = 5 * 60
VOTING_PERIOD_SECONDS = 15 * 60
JURY_BLOCKHASH_WINDOW = 256
COUNTDOWN_THRESHOLD_SECONDS = 30 * 60

_JURY_EXPIRY_MARKERS = ("Blockhash not available", "256 blocks")


@dataclass(frozen=True)
class DurationBreakdown:
    """Human-scale split of a duration. Display only."""

    days: int
    hours: int
    minutes: int
    seconds: int

    def label(self) -> str:
        """'2d 3h', '4h 10m', '14m 5s' or '5s': the two most significant units."""
        if self.days:
            return f"{self.days}d {self.hours}h"
        if self.hours:
            return f"{self.hours}h {self.minutes}m"
        if self.minutes:
            return f"{self.minutes}m {self.seconds}s"
        return f"{self.seconds}s"


@dataclass(frozen=True)
class DeadlineStatus:
    deadline: int
    has_passed: bool
    remaining: int  # seconds, 0 once passed

    @property
    def breakdown(self) -> DurationBreakdown:
        return breakdown(self.remaining)

    @property
    def in_countdown(self) -> bool:
        """True in the final 30 minutes before the deadline."""
        return 0 < self.remaining <= COUNTDOWN_THRESHOLD_SECONDS


def deadline_status(deadline: int, now: int) -> DeadlineStatus:
    return DeadlineStatus(
        deadline=deadline,
        has_passed=now >= deadline,
        remaining=max(0, deadline - now),
    )


def evaluate_deadlines(
    deadlines: Mapping[str, int | None], now: int
) -> dict[str, DeadlineStatus]:
    """Evaluate every known deadline; unknown (None) deadlines are skipped."""
    return {
        name: deadline_status(value, now)
        for name, value in deadlines.items()
        if value is not None
    }


def breakdown(seconds: int) -> DurationBreakdown:
    seconds = max(0, seconds)
    days, rem = divmod(seconds, 86_400)
    hours, rem = divmod(rem, 3_600)
    minutes, secs = divmod(rem, 60)
    return DurationBreakdown(days=days, hours=hours, minutes=minutes, seconds=secs)


def format_countdown(seconds: int) -> str:
    """MM:SS with minutes uncapped, e.g. 1805 -> '30:05'."""
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


def remaining_label(status: DeadlineStatus, ended_label: str = "Ended") -> str:
    if status.has_passed:
        return ended_label
    return status.breakdown.label()


def is_jury_selection_expired(blocks_elapsed_since_dispute: int) -> bool:
    """True once the seed blockhash can no longer be read.

    Exactly 256 elapsed blocks is still drawable; 257 is not. Monotonic in
    its input, so a market observed as expired stays expired.
    """
    if blocks_elapsed_since_dispute < 0:
        raise ValueError(
            f"blocks_elapsed_since_dispute must be >= 0, got {blocks_elapsed_since_dispute}"
        )
    return blocks_elapsed_since_dispute > JURY_BLOCKHASH_WINDOW


def blocks_elapsed(dispute_block: int, current_block: int) -> int:
    """Blocks since the dispute was raised; a lagging RPC node clamps to 0."""
    return max(0, current_block - dispute_block)


def is_jury_expiry_rejection(message: str) -> bool:
    """Whether a ledger revert message means the jury seed is gone for good."""
    return any(marker in message for marker in _JURY_EXPIRY_MARKERS)
