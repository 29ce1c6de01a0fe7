"""Currency formatting helpers."""

from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal

Formatter = Callable[[Decimal], str]

_CENTS = Decimal("0.01")


def format_value(value: Decimal, currency_symbol: str = "R$") -> str:
    """
    Format a price in Brazilian style with '.' thousands and ',' decimals.
    Example: Decimal("1234.5") -> "R$ 1.234,50"
    """
    rounded = value.quantize(_CENTS, rounding=ROUND_HALF_UP)
    digits = f"{rounded:,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{currency_symbol} {digits}"


def currency_formatter(currency_symbol: str) -> Formatter:
    """Return a formatter bound to a currency symbol."""

    def _format(value: Decimal) -> str:
        return format_value(value, currency_symbol)

    return _format
