"""UTC datetime utilities.

Ledger deadlines are unix timestamps in whole seconds, so the decision core
works on ints; datetimes only appear at the display edge.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def now_ts() -> int:
    """Current wall-clock time as a whole-second unix timestamp."""
    return int(utc_now().timestamp())


def ts_to_datetime(ts: int) -> datetime:
    """Convert a ledger timestamp to an aware UTC datetime."""
    return datetime.fromtimestamp(ts, tz=timezone.utc)
