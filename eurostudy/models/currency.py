"""
Currency conversion and display formatting for cost estimates.

All amounts inside the estimation engine are held in the base currency (EUR).
Conversion to the display currency happens only at presentation time, and
every consumer (HTTP API, export report) goes through ``convert`` so that two
renderings of the same estimate always show the same figures.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

BASE_CURRENCY = "EUR"
DEFAULT_CURRENCY_SYMBOL = "€"


def round_half_away_from_zero(value: float) -> int:
    """
    Round to the nearest whole unit, halves away from zero.

    Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``),
    which is not what users expect to see on a cost breakdown.

    Args:
        value: The value to round

    Returns:
        The rounded integer
    """
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def convert(
    amount_base: float, target_currency: str, rate_table: Mapping[str, float]
) -> int:
    """
    Convert a base-currency amount to the target currency for display.

    Args:
        amount_base: Amount in the base currency (EUR)
        target_currency: ISO code of the display currency
        rate_table: Multiplicative rates against the base currency

    Returns:
        The converted amount rounded to whole units. Unknown currency codes
        use a rate of 1.
    """
    rate = rate_table.get(target_currency, 1)
    return round_half_away_from_zero(amount_base * rate)


def currency_symbol(code: str, symbol_table: Mapping[str, str]) -> str:
    """Look up the display symbol for a currency code."""
    return symbol_table.get(code, DEFAULT_CURRENCY_SYMBOL)


class CurrencyFormatter(BaseModel):
    """Formats whole-unit currency and percentage values for display."""

    currency_symbol: str = Field(
        default=DEFAULT_CURRENCY_SYMBOL, description="Currency symbol"
    )
    thousands_separator: str = Field(default=",", description="Thousands separator")
    show_currency_symbol: bool = Field(
        default=True, description="Whether to show currency symbol"
    )

    def format_currency(self, amount: int, show_symbol: Optional[bool] = None) -> str:
        """
        Format an already converted amount for display.

        Args:
            amount: Whole-unit amount in the display currency
            show_symbol: Override the default symbol display setting

        Returns:
            Formatted currency string, e.g. ``€13,433``
        """
        show_symbol = (
            show_symbol if show_symbol is not None else self.show_currency_symbol
        )

        formatted = f"{abs(amount):,}".replace(",", self.thousands_separator)
        sign = "-" if amount < 0 else ""

        if show_symbol:
            return f"{sign}{self.currency_symbol}{formatted}"
        return f"{sign}{formatted}"

    def format_percentage(self, percent: int) -> str:
        """Format a whole percentage (0-100 scale) for display."""
        return f"{percent}%"


class CurrencyConverter(BaseModel):
    """Converts and formats base-currency amounts for one display currency."""

    model_config = ConfigDict(frozen=True)

    target_currency: str = Field(
        default=BASE_CURRENCY, min_length=3, max_length=3, description="Display currency"
    )
    rate_table: Dict[str, float] = Field(
        default_factory=lambda: {BASE_CURRENCY: 1.0},
        description="Rates against the base currency",
    )
    symbol_table: Dict[str, str] = Field(
        default_factory=lambda: {BASE_CURRENCY: DEFAULT_CURRENCY_SYMBOL},
        description="Display symbols by currency code",
    )

    @property
    def rate(self) -> float:
        """Rate applied to base-currency amounts."""
        return self.rate_table.get(self.target_currency, 1)

    @property
    def symbol(self) -> str:
        return currency_symbol(self.target_currency, self.symbol_table)

    def convert(self, amount_base: float) -> int:
        """Convert a base-currency amount using the shared contract."""
        return convert(amount_base, self.target_currency, self.rate_table)

    def format(self, amount_base: float) -> str:
        """Convert then format a base-currency amount, e.g. ``₹1,215,665``."""
        formatter = CurrencyFormatter(currency_symbol=self.symbol)
        return formatter.format_currency(self.convert(amount_base))
