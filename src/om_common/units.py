"""Integer arithmetic utilities for token amounts.

All amounts, shares and stakes are int in the token's smallest unit.
No float, no Decimal. Display strings are built from integer division only.
"""

DEFAULT_DECIMALS = 6


def validate_amount(amount: int) -> None:
    """Validate that an on-chain amount is a non-negative integer."""
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError(f"Amount must be an int, got {type(amount).__name__}")
    if amount < 0:
        raise ValueError(f"Amount must be non-negative, got {amount}")


def units_to_display(amount: int, decimals: int = DEFAULT_DECIMALS) -> str:
    """Render smallest units as a 2-decimal string, truncating.

    1_500_000 -> '1.50', 123_456_789 -> '123.45', -2_000_000 -> '-2.00'.
    """
    sign = "-" if amount < 0 else ""
    amount = abs(amount)
    if decimals >= 2:
        hundredths = amount // 10 ** (decimals - 2)
    else:
        hundredths = amount * 10 ** (2 - decimals)
    return f"{sign}{hundredths // 100:,}.{hundredths % 100:02d}"


def parse_units(text: str, decimals: int = DEFAULT_DECIMALS) -> int:
    """Parse a human amount ('0.5', '12', '3.141') into smallest units.

    Extra fractional digits beyond `decimals` are truncated, never rounded.
    """
    text = text.strip()
    if not text or text.startswith("-"):
        raise ValueError(f"Amount must be a non-negative number, got {text!r}")
    whole, _, frac = text.partition(".")
    if not (whole or frac) or not (whole or "0").isdigit() or (frac and not frac.isdigit()):
        raise ValueError(f"Amount is not a number: {text!r}")
    frac = (frac + "0" * decimals)[:decimals]
    return int(whole or "0") * 10**decimals + int(frac or "0")
