"""
Search, filter and sort helpers for the transaction history table.
"""

from typing import Iterable, List, Optional

import pandas as pd

from ..models.transaction import Transaction, TransactionKind

SORT_BY_DATE = "date"
SORT_BY_AMOUNT = "amount"

TABLE_COLUMNS = ["id", "type", "description", "category_source", "amount", "created_at"]


def filter_transactions(
    transactions: Iterable[Transaction],
    search: str = "",
    kind: Optional[TransactionKind] = None,
    sort_by: str = SORT_BY_DATE,
) -> List[Transaction]:
    """
    Apply the history table's search box, type filter and sort order

    Args:
        transactions: Transactions from the last refresh
        search: Case-insensitive text matched against description or category/source
        kind: Keep only this kind; None keeps both
        sort_by: "date" (newest first) or "amount" (largest first)
    """
    if sort_by not in (SORT_BY_DATE, SORT_BY_AMOUNT):
        raise ValueError(f"Unsupported sort order: {sort_by}")

    needle = (search or "").strip().lower()
    selected = [
        t
        for t in transactions
        if (kind is None or t.kind == kind)
        and (
            needle in t.description.lower()
            or needle in t.category_source.lower()
        )
    ]

    if sort_by == SORT_BY_DATE:
        return sorted(selected, key=lambda t: t.created_at, reverse=True)
    return sorted(selected, key=lambda t: t.amount, reverse=True)


def transactions_to_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """Tabulate transactions for display and CSV export."""
    rows = [t.model_dump(by_alias=True, mode="json") for t in transactions]
    if not rows:
        return pd.DataFrame(columns=TABLE_COLUMNS)
    df = pd.DataFrame(rows)[TABLE_COLUMNS]
    df["amount"] = pd.to_numeric(df["amount"])
    df["created_at"] = pd.to_datetime(df["created_at"], utc=True)
    return df


def to_csv(transactions: Iterable[Transaction]) -> str:
    return transactions_to_frame(transactions).to_csv(index=False)
