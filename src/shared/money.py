"""Money helpers.

Amounts travel as float dollars at the edges (fixtures, carrier responses,
API payloads) and as integer cents everywhere totals are accumulated.
"""

from decimal import ROUND_HALF_UP, Decimal


def to_cents(amount: float | int | str | Decimal | None) -> int:
    """Convert a dollar amount to integer cents, rounding half-up."""
    if amount is None:
        return 0
    return int((Decimal(str(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def from_cents(cents: int) -> float:
    return float(Decimal(cents) / 100)


def percent_of(cents: int, basis_points: int) -> int:
    """Return ``basis_points`` / 10000 of ``cents``, rounded half-up."""
    return int((Decimal(cents) * basis_points / 10000).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_price(amount: float | int, currency_symbol: str = "$") -> str:
    """Format a dollar amount for display, e.g. ``$1,234.00``."""
    return f"{currency_symbol}{amount:,.2f}"


def format_cents(cents: int, currency_symbol: str = "$") -> str:
    return format_price(from_cents(cents), currency_symbol)
