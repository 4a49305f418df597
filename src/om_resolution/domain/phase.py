"""Resolution phase resolver: the single place ledger status is interpreted.

Every consumer (list filters, action gate, claim display) depends on the
Phase returned here rather than switching on the raw status itself.

Status and wall-clock time are always read together: market, resolution and
jury data are fetched moments apart, so a snapshot can still say
DISPUTE_WINDOW after the window has closed. The resolver never raises; any
missing input yields INDETERMINATE.
"""

import logging

from src.om_common.enums import MarketFilter, Phase, ResolutionStatus
from src.om_resolution.domain.models import Market, ResolutionRecord

logger = logging.getLogger(__name__)

PENDING_PHASES: frozenset[Phase] = frozenset({
    Phase.AWAITING_PROPOSAL,
    Phase.DISPUTE_WINDOW,
    Phase.READY_TO_FINALIZE_UNDISPUTED,
    Phase.AWAITING_JURY,
    Phase.JURY_VOTING,
    Phase.READY_TO_FINALIZE_DISPUTE,
})

_FILTER_PHASES: dict[MarketFilter, frozenset[Phase]] = {
    MarketFilter.ACTIVE: frozenset({Phase.TRADING_OPEN}),
    MarketFilter.PENDING: PENDING_PHASES,
    MarketFilter.RESOLVED: frozenset({Phase.FINALIZED}),
}


def resolve_phase(
    market: Market | None,
    resolution: ResolutionRecord | None,
    now: int,
    jury_expired: bool | None,
) -> Phase:
    if market is None or resolution is None or resolution.status is None:
        return Phase.INDETERMINATE

    status = resolution.status
    if status == ResolutionStatus.PENDING:
        if market.end_time is None:
            return Phase.INDETERMINATE
        # Trading closed but nobody has proposed yet; the ledger still says PENDING
        return Phase.TRADING_OPEN if now < market.end_time else Phase.AWAITING_PROPOSAL
    if status == ResolutionStatus.AWAITING_PROPOSAL:
        return Phase.AWAITING_PROPOSAL
    if status == ResolutionStatus.DISPUTE_WINDOW:
        if resolution.dispute_window_end is None:
            return Phase.INDETERMINATE
        if now < resolution.dispute_window_end:
            return Phase.DISPUTE_WINDOW
        return Phase.READY_TO_FINALIZE_UNDISPUTED
    if status == ResolutionStatus.IN_DISPUTE:
        if jury_expired is None:
            return Phase.INDETERMINATE
        return Phase.EXPIRED if jury_expired else Phase.AWAITING_JURY
    if status == ResolutionStatus.JURY_VOTING:
        if resolution.voting_end is None:
            return Phase.INDETERMINATE
        if now < resolution.voting_end:
            return Phase.JURY_VOTING
        return Phase.READY_TO_FINALIZE_DISPUTE
    if status == ResolutionStatus.FINALIZED:
        return Phase.FINALIZED

    logger.warning("Unknown resolution status %r, treating as indeterminate", status)
    return Phase.INDETERMINATE


def is_hidden(phase: Phase) -> bool:
    """EXPIRED markets are hidden for good, unlike ordinary waiting phases."""
    return phase == Phase.EXPIRED


def matches_filter(phase: Phase, market_filter: MarketFilter) -> bool:
    """Whether a market belongs on a list tab.

    INDETERMINATE shows on every tab as a loading placeholder; EXPIRED on none.
    """
    if phase == Phase.INDETERMINATE:
        return True
    return phase in _FILTER_PHASES[market_filter]
