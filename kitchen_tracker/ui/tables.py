"""
Transaction history table with search, type filter, sorting and delete.
"""

import streamlit as st

from ..container import Container
from ..models.transaction import TransactionKind
from ..services.errors import KitchenTrackerError
from ..utils.currency_utils import CurrencyUtils
from ..utils.transaction_views import (
    SORT_BY_AMOUNT,
    SORT_BY_DATE,
    filter_transactions,
    to_csv,
    transactions_to_frame,
)
from .metrics import MetricComponents
from .notifications import notify_success, show_error

_TYPE_FILTERS = {
    "All Types": None,
    "Expenses": TransactionKind.EXPENSE,
    "Revenue": TransactionKind.REVENUE,
}
_SORTS = {"Sort by Date": SORT_BY_DATE, "Sort by Amount": SORT_BY_AMOUNT}


class TransactionTable:
    """Transaction history tab."""

    @staticmethod
    def render(container: Container) -> None:
        dashboard = container.get_dashboard_service()
        MetricComponents.totals_row(dashboard.analytics)

        st.subheader("Transaction History")
        col1, col2, col3 = st.columns([3, 1, 1])
        search = col1.text_input("🔍 Search transactions", placeholder="Search by description or category")
        type_label = col2.selectbox("Type", list(_TYPE_FILTERS))
        sort_label = col3.selectbox("Sort", list(_SORTS))

        rows = filter_transactions(
            dashboard.transactions,
            search=search,
            kind=_TYPE_FILTERS[type_label],
            sort_by=_SORTS[sort_label],
        )

        if not rows:
            if dashboard.transactions:
                st.info("No transactions match your filters")
            else:
                st.info("No transactions yet. Add your first transaction to get started")
            return

        for transaction in rows:
            c1, c2, c3, c4 = st.columns([4, 2, 2, 1])
            badge = "🔴" if transaction.is_expense else "🟢"
            c1.markdown(f"{badge} **{transaction.description}**  \n{transaction.category_source}")
            c2.write(transaction.created_at.strftime("%d %b %Y"))
            sign = "-" if transaction.is_expense else "+"
            c3.write(f"{sign}{CurrencyUtils.format_amount(transaction.amount)}")
            if c4.button("🗑️", key=f"delete_{transaction.id}", help="Delete transaction"):
                st.session_state["confirm_delete"] = transaction.id

        TransactionTable._confirm_delete(container)

        st.download_button(
            "📄 Download CSV",
            data=to_csv(rows),
            file_name="transactions.csv",
            mime="text/csv",
        )
        with st.expander("Table view"):
            st.dataframe(transactions_to_frame(rows), use_container_width=True, hide_index=True)

    @staticmethod
    def _confirm_delete(container: Container) -> None:
        transaction_id = st.session_state.get("confirm_delete")
        if not transaction_id:
            return

        st.warning("Delete this transaction? This action cannot be undone.")
        col1, col2 = st.columns(2)
        if col1.button("Delete", type="primary"):
            st.session_state.pop("confirm_delete", None)
            try:
                container.get_dashboard_service().delete_transaction(transaction_id)
            except KitchenTrackerError as e:
                show_error(container.get_error_handler(), e, "delete transaction")
                return
            notify_success("Transaction deleted successfully!")
            st.rerun()
        if col2.button("Cancel"):
            st.session_state.pop("confirm_delete", None)
            st.rerun()
