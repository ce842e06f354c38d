"""
Form components for transaction entry.
"""

import streamlit as st

from ..container import Container
from ..models.transaction import TransactionKind
from ..services.errors import KitchenTrackerError
from ..services.validators import build_transaction, categories_for
from ..utils.currency_utils import CURRENCY_SYMBOL
from .notifications import notify_success, show_error


class FormComponents:
    """Collection of transaction entry forms."""

    @staticmethod
    def add_transaction_form(container: Container) -> None:
        """Record an expense or a platform payout."""
        st.subheader("➕ Add Transaction")

        kind_label = st.radio(
            "Transaction Type",
            options=[TransactionKind.EXPENSE.value, TransactionKind.REVENUE.value],
            horizontal=True,
            key="new_transaction_kind",
        )
        kind = TransactionKind(kind_label)
        is_expense = kind == TransactionKind.EXPENSE

        with st.form("add_transaction_form", clear_on_submit=True):
            category_source = st.selectbox(
                "Category" if is_expense else "Revenue Source",
                options=categories_for(kind),
                index=None,
                placeholder="Select expense category" if is_expense else "Select revenue source",
            )
            amount = st.text_input(f"Amount ({CURRENCY_SYMBOL})", placeholder="0.00")
            description = ""
            if is_expense:
                description = st.text_input("Description", placeholder="What was this expense for?")
            submitted = st.form_submit_button("Add Transaction", type="primary")

        if submitted:
            try:
                transaction = build_transaction(kind, category_source, amount, description)
                container.get_dashboard_service().add_transaction(transaction)
            except KitchenTrackerError as e:
                show_error(container.get_error_handler(), e, "add transaction")
                return
            notify_success("Transaction added successfully!")
            st.rerun()
