"""
Currency utility functions.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

CURRENCY_SYMBOL = "₹"

Number = Union[int, float, Decimal]


class CurrencyUtils:
    """Utility functions for currency formatting."""

    @staticmethod
    def format_amount(
        amount: Optional[Number],
        symbol: str = CURRENCY_SYMBOL,
        places: int = 2,
    ) -> str:
        """Format amount with currency symbol and thousands separators."""
        if amount is None:
            return "N/A"

        value = Decimal(str(amount))
        quantum = Decimal(1).scaleb(-places)
        rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
        sign = "-" if rounded < 0 else ""
        return f"{sign}{symbol}{abs(rounded):,.{places}f}"

    @staticmethod
    def format_whole(amount: Optional[Number], symbol: str = CURRENCY_SYMBOL) -> str:
        """Format rounded to whole units, as on the KPI cards."""
        return CurrencyUtils.format_amount(amount, symbol, places=0)

    @staticmethod
    def format_percentage(value: Optional[Number]) -> str:
        if value is None:
            return "N/A"
        return f"{Decimal(str(value)):.1f}%"
