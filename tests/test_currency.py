"""
Tests for currency conversion and display formatting.
"""

import pytest

from eurostudy.models.country_catalog import DEFAULT_EXCHANGE_RATES
from eurostudy.models.currency import (
    CurrencyConverter,
    CurrencyFormatter,
    convert,
    currency_symbol,
    round_half_away_from_zero,
)


class TestRounding:
    """Test half-away-from-zero rounding."""

    @pytest.mark.parametrize(
        "value,expected",
        [(2.5, 3), (3.5, 4), (0.5, 1), (-2.5, -3), (2.4, 2), (1992.0, 1992)],
    )
    def test_round_half_away_from_zero(self, value, expected):
        """Test halves round away from zero, unlike built-in round."""
        assert round_half_away_from_zero(value) == expected


class TestConvert:
    """Test the shared conversion contract."""

    def test_eur_is_identity(self):
        """Test that EUR amounts are only rounded."""
        assert convert(13433, "EUR", DEFAULT_EXCHANGE_RATES) == 13433
        assert convert(1099.6, "EUR", DEFAULT_EXCHANGE_RATES) == 1100

    def test_converts_with_rate(self):
        """Test multiplicative conversion with half-up rounding."""
        # 13433 * 90.5 = 1215686.5
        assert convert(13433, "INR", DEFAULT_EXCHANGE_RATES) == 1215687
        assert convert(1000, "USD", DEFAULT_EXCHANGE_RATES) == 1080

    def test_unknown_currency_uses_rate_one(self):
        """Test that unknown codes fall back to a rate of 1."""
        assert convert(250.5, "XYZ", DEFAULT_EXCHANGE_RATES) == 251


class TestCurrencyFormatter:
    """Test CurrencyFormatter functionality."""

    def test_format_currency(self):
        """Test currency formatting with thousands separators."""
        formatter = CurrencyFormatter()
        assert formatter.format_currency(13433) == "€13,433"
        assert formatter.format_currency(0) == "€0"

    def test_format_negative_amount(self):
        """Test that negatives put the sign before the symbol."""
        formatter = CurrencyFormatter(currency_symbol="$")
        assert formatter.format_currency(-1500) == "-$1,500"

    def test_format_without_symbol(self):
        """Test symbol override."""
        formatter = CurrencyFormatter(thousands_separator=".")
        assert formatter.format_currency(1215687, show_symbol=False) == "1.215.687"

    def test_format_percentage(self):
        """Test percentage formatting."""
        assert CurrencyFormatter().format_percentage(151) == "151%"


class TestCurrencyConverter:
    """Test CurrencyConverter functionality."""

    def test_symbol_lookup(self):
        """Test symbol lookup with euro fallback."""
        assert currency_symbol("INR", {"INR": "₹"}) == "₹"
        assert currency_symbol("XYZ", {"INR": "₹"}) == "€"

    def test_convert_and_format(self):
        """Test conversion and formatting through one converter."""
        converter = CurrencyConverter(
            target_currency="INR",
            rate_table=DEFAULT_EXCHANGE_RATES,
            symbol_table={"INR": "₹"},
        )

        assert converter.rate == 90.5
        assert converter.symbol == "₹"
        assert converter.convert(13433) == 1215687
        assert converter.format(13433) == "₹1,215,687"

    def test_default_converter_is_euro(self):
        """Test default converter."""
        converter = CurrencyConverter()
        assert converter.format(15425) == "€15,425"
