"""
Reusable Metric Components for the dashboard
"""

from decimal import Decimal
from typing import List

import streamlit as st

from ..models.analytics import AnalyticsSnapshot
from ..models.transaction import Transaction, TransactionSummary
from ..utils.currency_utils import CurrencyUtils


class MetricComponents:
    """Summary cards and KPI rows."""

    @staticmethod
    def summary_cards(summary: TransactionSummary, margin: Decimal) -> None:
        """Headline revenue, expenses and profit/loss from the server summary."""
        col1, col2, col3 = st.columns(3)
        col1.metric("Total Revenue", CurrencyUtils.format_amount(summary.revenue))
        col2.metric("Total Expenses", CurrencyUtils.format_amount(summary.expense))
        label = "Net Profit" if summary.profit_loss >= 0 else "Net Loss"
        col3.metric(
            label,
            CurrencyUtils.format_amount(summary.profit_loss),
            delta=f"{CurrencyUtils.format_percentage(margin)} margin",
            delta_color="normal" if summary.profit_loss >= 0 else "inverse",
        )

    @staticmethod
    def totals_row(snapshot: AnalyticsSnapshot) -> None:
        col1, col2, col3 = st.columns(3)
        col1.metric("Total Revenue", CurrencyUtils.format_amount(snapshot.total_revenue))
        col2.metric("Total Expenses", CurrencyUtils.format_amount(snapshot.total_expenses))
        col3.metric("Net Profit", CurrencyUtils.format_amount(snapshot.net_profit))

    @staticmethod
    def kpi_row(snapshot: AnalyticsSnapshot) -> None:
        col1, col2, col3, col4 = st.columns(4)
        col1.metric("Profit Margin", CurrencyUtils.format_percentage(snapshot.profit_margin))
        col2.metric("Avg Transaction", CurrencyUtils.format_whole(snapshot.average_transaction_value))
        col3.metric("Revenue Entries", snapshot.revenue_count)
        col4.metric("Total Transactions", snapshot.transaction_count)

    @staticmethod
    def recent_activity(transactions: List[Transaction]) -> None:
        st.subheader("Recent Activity")
        if not transactions:
            st.info("No recent transactions")
            return
        for transaction in transactions:
            sign = "-" if transaction.is_expense else "+"
            icon = "🔴" if transaction.is_expense else "🟢"
            col1, col2 = st.columns([4, 1])
            col1.markdown(
                f"{icon} **{transaction.description}**  \n"
                f"{transaction.category_source} · {transaction.created_at.strftime('%d %b %Y')}"
            )
            col2.markdown(f"**{sign}{CurrencyUtils.format_amount(transaction.amount)}**")
