"""
Analytics Aggregator

Derives totals, margins, category/source breakdowns and the normalized
revenue/expense/profit comparison from a list of transactions. Pure
functions; the whole snapshot is recomputed for every new list.
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Sequence

from ..models.analytics import AnalyticsSnapshot, BreakdownEntry, RadialPoint
from ..models.transaction import Transaction, TransactionKind

ZERO = Decimal("0")
HUNDRED = Decimal("100")

REVENUE_COLOR = "#10b981"
EXPENSE_COLOR = "#ef4444"
PROFIT_COLOR = "#3b82f6"
LOSS_COLOR = "#f59e0b"

CHART_COLORS = [
    "#3b82f6",
    "#ef4444",
    "#10b981",
    "#f59e0b",
    "#8b5cf6",
    "#06b6d4",
    "#f97316",
    "#84cc16",
    "#ec4899",
    "#6b7280",
]

EXPENSE_COLORS = [
    "#ef4444",
    "#3b82f6",
    "#10b981",
    "#f59e0b",
    "#8b5cf6",
    "#f97316",
    "#06b6d4",
    "#84cc16",
    "#ec4899",
    "#14b8a6",
]


def partition(transactions: Iterable[Transaction]) -> tuple:
    """Split transactions into (expenses, revenues)."""
    expenses: List[Transaction] = []
    revenues: List[Transaction] = []
    for transaction in transactions:
        if transaction.kind == TransactionKind.EXPENSE:
            expenses.append(transaction)
        else:
            revenues.append(transaction)
    return expenses, revenues


def total(transactions: Iterable[Transaction]) -> Decimal:
    return sum((t.amount for t in transactions), ZERO)


def group_by_category_source(transactions: Iterable[Transaction]) -> Dict[str, Decimal]:
    """Sum amounts per category/source, keyed in first-seen order."""
    grouped: Dict[str, Decimal] = {}
    for transaction in transactions:
        key = transaction.category_source
        grouped[key] = grouped.get(key, ZERO) + transaction.amount
    return grouped


def profit_margin(revenue: Decimal, profit: Decimal) -> Decimal:
    """Profit as a percentage of revenue, one decimal; 0 without revenue."""
    if revenue == 0:
        return ZERO
    return (profit / revenue * HUNDRED).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def average_value(amount: Decimal, count: int) -> Decimal:
    if count == 0:
        return ZERO
    return amount / Decimal(count)


def normalize(values: Sequence[Decimal]) -> List[Decimal]:
    """Express each value's magnitude as a percentage of the largest magnitude."""
    peak = max((abs(v) for v in values), default=ZERO)
    if peak == 0:
        return [ZERO for _ in values]
    return [
        (abs(v) / peak * HUNDRED).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        for v in values
    ]


def radial_series(revenue: Decimal, expenses: Decimal, profit: Decimal) -> List[RadialPoint]:
    revenue_pct, expense_pct, profit_pct = normalize([revenue, expenses, profit])
    is_loss = profit < 0
    return [
        RadialPoint(name="Revenue", value=revenue, percentage=revenue_pct, color=REVENUE_COLOR),
        RadialPoint(name="Expenses", value=expenses, percentage=expense_pct, color=EXPENSE_COLOR),
        RadialPoint(
            name="Loss" if is_loss else "Profit",
            value=profit,
            percentage=profit_pct,
            color=LOSS_COLOR if is_loss else PROFIT_COLOR,
            is_loss=is_loss,
        ),
    ]


class AnalyticsService:
    """Builds the dashboard's analytics snapshot."""

    def summarize(self, transactions: Sequence[Transaction]) -> AnalyticsSnapshot:
        expenses, revenues = partition(transactions)
        total_revenue = total(revenues)
        total_expenses = total(expenses)
        net_profit = total_revenue - total_expenses

        return AnalyticsSnapshot(
            total_revenue=total_revenue,
            total_expenses=total_expenses,
            net_profit=net_profit,
            profit_margin=profit_margin(total_revenue, net_profit),
            average_transaction_value=average_value(total_revenue, len(revenues)),
            revenue_count=len(revenues),
            expense_count=len(expenses),
            transaction_count=len(transactions),
            expense_categories=[
                BreakdownEntry(name=name, value=value)
                for name, value in group_by_category_source(expenses).items()
            ],
            revenue_sources=[
                BreakdownEntry(name=name, value=value)
                for name, value in group_by_category_source(revenues).items()
            ],
            radial=radial_series(total_revenue, total_expenses, net_profit),
        )
