"""
Unit tests for the analytics aggregator

Covers totals, margins, grouping and the normalized radial comparison,
including the loss case and an empty transaction list.
"""

from decimal import Decimal

import pytest

from kitchen_tracker.models.transaction import TransactionKind
from kitchen_tracker.services.analytics_service import (
    LOSS_COLOR,
    PROFIT_COLOR,
    AnalyticsService,
    average_value,
    group_by_category_source,
    normalize,
    partition,
    profit_margin,
)


@pytest.fixture
def analytics() -> AnalyticsService:
    return AnalyticsService()


@pytest.mark.unit
class TestGrouping:
    """Category and source breakdowns"""

    def test_expenses_grouped_by_category(self, sample_transactions):
        expenses, _ = partition(sample_transactions)
        grouped = group_by_category_source(expenses)
        assert grouped == {"Food": Decimal("150"), "Rent": Decimal("200")}

    def test_grouping_keeps_first_seen_order(self, sample_transactions):
        expenses, _ = partition(sample_transactions)
        assert list(group_by_category_source(expenses)) == ["Food", "Rent"]

    def test_partition_by_kind(self, sample_transactions):
        expenses, revenues = partition(sample_transactions)
        assert len(expenses) == 3
        assert [t.category_source for t in revenues] == ["Zomato"]


@pytest.mark.unit
class TestMargins:
    """Profit margin and averages"""

    def test_margin_rounded_to_one_decimal(self):
        assert profit_margin(Decimal("300"), Decimal("100")) == Decimal("33.3")

    def test_margin_zero_without_revenue(self):
        assert profit_margin(Decimal("0"), Decimal("-50")) == Decimal("0")

    def test_negative_margin(self):
        assert profit_margin(Decimal("200"), Decimal("-100")) == Decimal("-50.0")

    def test_average_value_without_entries(self):
        assert average_value(Decimal("0"), 0) == Decimal("0")

    def test_average_value(self):
        assert average_value(Decimal("900"), 3) == Decimal("300")


@pytest.mark.unit
class TestNormalize:
    """Radial chart percentages"""

    def test_largest_value_is_hundred(self):
        assert normalize([Decimal("1000"), Decimal("400"), Decimal("600")]) == [
            Decimal("100"),
            Decimal("40"),
            Decimal("60"),
        ]

    def test_all_zero_values(self):
        assert normalize([Decimal("0")] * 3) == [Decimal("0")] * 3

    def test_negative_values_use_magnitude(self):
        result = normalize([Decimal("100"), Decimal("300"), Decimal("-200")])
        assert result[1] == Decimal("100")
        assert result[2] == Decimal("66.67")
        assert all(Decimal("0") <= p <= Decimal("100") for p in result)


@pytest.mark.unit
class TestSummarize:
    """Full analytics snapshot"""

    def test_totals(self, analytics, sample_transactions):
        snapshot = analytics.summarize(sample_transactions)

        assert snapshot.total_revenue == Decimal("500")
        assert snapshot.total_expenses == Decimal("350")
        assert snapshot.net_profit == Decimal("150")
        assert snapshot.net_profit == snapshot.total_revenue - snapshot.total_expenses
        assert snapshot.profit_margin == Decimal("30.0")
        assert snapshot.revenue_count == 1
        assert snapshot.expense_count == 3
        assert snapshot.transaction_count == 4
        assert snapshot.average_transaction_value == Decimal("500")

    def test_group_sums_match_totals(self, analytics, sample_transactions):
        snapshot = analytics.summarize(sample_transactions)

        assert sum(snapshot.expense_category_map().values()) == snapshot.total_expenses
        assert sum(snapshot.revenue_source_map().values()) == snapshot.total_revenue

    def test_radial_profit(self, analytics, transaction_factory):
        transactions = [
            transaction_factory("1", TransactionKind.REVENUE, "Swiggy", "1000"),
            transaction_factory("2", TransactionKind.EXPENSE, "Rent", "400"),
        ]
        radial = analytics.summarize(transactions).radial

        assert [p.name for p in radial] == ["Revenue", "Expenses", "Profit"]
        assert [p.percentage for p in radial] == [Decimal("100"), Decimal("40"), Decimal("60")]
        assert radial[2].color == PROFIT_COLOR
        assert not radial[2].is_loss

    def test_radial_loss(self, analytics, transaction_factory):
        transactions = [
            transaction_factory("1", TransactionKind.REVENUE, "Swiggy", "100"),
            transaction_factory("2", TransactionKind.EXPENSE, "Rent", "300"),
        ]
        radial = analytics.summarize(transactions).radial

        assert radial[2].name == "Loss"
        assert radial[2].is_loss
        assert radial[2].color == LOSS_COLOR
        assert radial[2].value == Decimal("-200")

    def test_empty_list(self, analytics):
        snapshot = analytics.summarize([])

        assert snapshot.total_revenue == Decimal("0")
        assert snapshot.profit_margin == Decimal("0")
        assert snapshot.average_transaction_value == Decimal("0")
        assert snapshot.expense_categories == []
        assert snapshot.revenue_sources == []
        assert not snapshot.has_data
        assert [p.percentage for p in snapshot.radial] == [Decimal("0")] * 3

    def test_expenses_only(self, analytics, transaction_factory):
        snapshot = analytics.summarize(
            [transaction_factory("1", TransactionKind.EXPENSE, "Packaging", "80")]
        )

        assert snapshot.profit_margin == Decimal("0")
        assert snapshot.net_profit == Decimal("-80")
        assert snapshot.has_data
