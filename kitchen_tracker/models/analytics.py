"""
Analytics result models for the dashboard charts and KPI cards.
"""

from decimal import Decimal
from typing import List

from pydantic import Field

from .base import BaseModel


class BreakdownEntry(BaseModel):
    """Summed amount for one expense category or revenue source."""
    name: str
    value: Decimal


class RadialPoint(BaseModel):
    """One bar of the revenue / expenses / profit comparison."""
    name: str
    value: Decimal
    percentage: Decimal = Field(..., ge=0, le=100)
    color: str
    is_loss: bool = False


class AnalyticsSnapshot(BaseModel):
    """Derived analytics for a transaction list."""

    total_revenue: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")
    net_profit: Decimal = Decimal("0")
    profit_margin: Decimal = Decimal("0")
    average_transaction_value: Decimal = Decimal("0")
    revenue_count: int = 0
    expense_count: int = 0
    transaction_count: int = 0
    expense_categories: List[BreakdownEntry] = Field(default_factory=list)
    revenue_sources: List[BreakdownEntry] = Field(default_factory=list)
    radial: List[RadialPoint] = Field(default_factory=list)

    @property
    def has_data(self) -> bool:
        """False when revenue, expenses and profit are all zero."""
        return any(point.value != 0 for point in self.radial)

    def expense_category_map(self) -> dict:
        return {entry.name: entry.value for entry in self.expense_categories}

    def revenue_source_map(self) -> dict:
        return {entry.name: entry.value for entry in self.revenue_sources}
