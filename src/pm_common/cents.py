"""Integer arithmetic utilities for minor-unit money amounts.

All amounts and balances use int (cents). No float, no Decimal.
"""

from src.pm_common.errors import AmountMustBePositiveError


def validate_amount(amount: int) -> None:
    """Raise AmountMustBePositiveError unless amount is a positive int of cents (bool excluded)."""
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise AmountMustBePositiveError(amount)


def cents_to_display(cents: int) -> str:
    """Convert cents to display string: 6500 -> '$65.00', -1200 -> '-$12.00'."""
    if cents < 0:
        abs_cents = -cents
        return f"-${abs_cents // 100:,}.{abs_cents % 100:02d}"
    return f"${cents // 100:,}.{cents % 100:02d}"
