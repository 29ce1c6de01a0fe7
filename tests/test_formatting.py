"""Tests for currency formatting."""

from decimal import Decimal

from food_order.formatting import currency_formatter, format_value


def test_format_value_uses_brazilian_separators() -> None:
    assert format_value(Decimal("1234.5")) == "R$ 1.234,50"


def test_format_value_rounds_half_up_to_cents() -> None:
    assert format_value(Decimal("28.505")) == "R$ 28,51"


def test_currency_formatter_binds_symbol() -> None:
    formatter = currency_formatter("US$")

    assert formatter(Decimal("2")) == "US$ 2,00"
