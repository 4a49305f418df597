"""Display math: the only place float arithmetic is allowed.

Nothing here feeds settlement; amounts shown to users are still rendered
from integers via om_common.units.
"""

import math

from src.om_common.enums import MarketOutcome
from src.om_common.units import DEFAULT_DECIMALS
from src.om_resolution.domain.models import Market, SharesBalance


def chance_percentage(total_a: int, total_b: int) -> int:
    """Option A's share of volume rounded half-up to a whole percent; 0 with no volume."""
    total = total_a + total_b
    if total <= 0:
        return 0
    return math.floor(total_a / total * 100 + 0.5)


def option_percentages(total_a: int, total_b: int) -> tuple[int, int]:
    """Floored (A%, B%) for the progress bar; an empty market shows 50/50."""
    total = total_a + total_b
    if total <= 0:
        return 50, 50
    pct_a = total_a / total * 100
    return math.floor(pct_a), math.floor(100 - pct_a)


def format_volume(amount: int, decimals: int = DEFAULT_DECIMALS) -> str:
    """Compact volume: '1.2m', '3.4k' or '12.00'."""
    vol = amount / 10**decimals
    if vol >= 1_000_000:
        return f"{vol / 1_000_000:.1f}m"
    if vol >= 1_000:
        return f"{vol / 1_000:.1f}k"
    return f"{vol:.2f}"


def outcome_label(outcome: MarketOutcome, option_a: str, option_b: str) -> str:
    if outcome == MarketOutcome.OPTION_A:
        return option_a
    if outcome == MarketOutcome.OPTION_B:
        return option_b
    if outcome == MarketOutcome.INVALID:
        return "Invalid"
    return "Unknown"


def participation(market: Market, shares: SharesBalance | None) -> str | None:
    """'winner' / 'loser' on a market won by A or B; None if the account did not bet."""
    if shares is None or market.outcome not in (MarketOutcome.OPTION_A, MarketOutcome.OPTION_B):
        return None
    if shares.for_outcome(market.outcome) > 0:
        return "winner"
    if shares.total > 0:
        return "loser"
    return None
