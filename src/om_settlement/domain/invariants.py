"""Payout conservation checks for a finalized market."""

import logging
from collections.abc import Sequence

from src.om_settlement.domain.payout import PRECISION_SCALE

logger = logging.getLogger(__name__)


def truncation_bound(holders: int, loser_pool_total: int) -> int:
    """Largest total loss floor division can cause across `holders` payouts.

    Each holder loses strictly less than 1 + loser_pool_total / SCALE units
    (one floor on the proportion, one on the bonus), so the integer total is
    at most floor((holders * (SCALE + L) - 1) / SCALE). That equals `holders`
    while holders * loser_pool_total < SCALE.
    """
    if holders <= 0:
        return 0
    return (holders * (PRECISION_SCALE + loser_pool_total) - 1) // PRECISION_SCALE


def verify_payout_conservation(
    payouts: Sequence[int], winner_pool_total: int, loser_pool_total: int
) -> None:
    """Raises AssertionError if winners' payouts break conservation.

    `payouts` must cover every holder of the winning option.

    INV-1: sum(payouts) <= winner_pool_total + loser_pool_total
    INV-2: pool total - sum(payouts) <= truncation_bound(len(payouts), loser)
    INV-2 is skipped for an empty winning pool, where nothing is paid out.
    """
    pool = winner_pool_total + loser_pool_total
    paid = sum(payouts)
    assert paid <= pool, f"INV-1 violated: paid={paid} > pool={pool}"
    if winner_pool_total == 0:
        return

    bound = truncation_bound(len(payouts), loser_pool_total)
    assert pool - paid <= bound, (
        f"INV-2 violated: dust={pool - paid} > bound={bound} for {len(payouts)} holders"
    )

    logger.debug("Payout invariants OK: pool=%d, paid=%d, holders=%d", pool, paid, len(payouts))
