"""
Dashboard state service.

Holds the transactions and summary from the last successful refresh and
drives the create/delete flows. The list and summary are fetched
concurrently; state only changes when both requests succeed.

The initial load is attempted once. After a failure nothing is re-sent
until refresh() is called again or a create/delete succeeds.
"""

from concurrent.futures import ThreadPoolExecutor, wait
from decimal import Decimal
from typing import Callable, List, Optional, Tuple

from ..models.analytics import AnalyticsSnapshot
from ..models.transaction import Transaction, TransactionCreate, TransactionSummary
from ..security.pii_protection import get_structured_logger
from .analytics_service import AnalyticsService, profit_margin
from .errors import ServiceError
from .transaction_client import TransactionClient

logger = get_structured_logger().get_logger(__name__)


class DashboardService:
    """In-memory view state for the dashboard."""

    def __init__(
        self,
        transaction_client: TransactionClient,
        analytics_service: Optional[AnalyticsService] = None,
        on_auth_failure: Optional[Callable[[], None]] = None,
    ):
        self.transaction_client = transaction_client
        self.analytics_service = analytics_service or AnalyticsService()
        self.on_auth_failure = on_auth_failure
        self.transactions: List[Transaction] = []
        self.summary = TransactionSummary.empty()
        self.loaded = False
        self.load_attempted = False
        self._version = 0
        self._executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="dashboard-refresh")
        self._analytics_cache: Optional[Tuple[int, AnalyticsSnapshot]] = None

    def _guard(self, func, *args):
        """Run a client call, reporting rejected credentials before re-raising."""
        try:
            return func(*args)
        except ServiceError as e:
            if e.is_unauthorized and self.on_auth_failure is not None:
                logger.warning("Backend rejected credentials", status_code=e.status_code)
                self.on_auth_failure()
            raise

    def _fetch_both(self) -> Tuple[TransactionSummary, List[Transaction]]:
        summary_future = self._executor.submit(self.transaction_client.get_summary)
        list_future = self._executor.submit(self.transaction_client.list_transactions)
        wait([summary_future, list_future])
        return summary_future.result(), list_future.result()

    def refresh(self) -> None:
        """Reload summary and transactions; all or nothing."""
        self.load_attempted = True
        summary, transactions = self._guard(self._fetch_both)
        self.summary = summary
        self.transactions = transactions
        self.loaded = True
        self._version += 1
        logger.info(
            "Dashboard refreshed",
            transaction_count=len(transactions),
            version=self._version,
        )

    def load_once(self) -> bool:
        """Run the initial refresh unless one was already attempted.

        Returns True when a request was issued.
        """
        if self.load_attempted:
            return False
        self.refresh()
        return True

    def add_transaction(self, transaction: TransactionCreate) -> None:
        self._guard(self.transaction_client.create_transaction, transaction)
        logger.info("Transaction created", kind=transaction.kind.value)
        self.refresh()

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete on the backend; the local list changes only via the refresh."""
        self._guard(self.transaction_client.delete_transaction, transaction_id)
        logger.info("Transaction deleted", transaction_id=transaction_id)
        self.refresh()

    @property
    def analytics(self) -> AnalyticsSnapshot:
        """Analytics for the current list, memoized per refresh."""
        if self._analytics_cache is None or self._analytics_cache[0] != self._version:
            snapshot = self.analytics_service.summarize(self.transactions)
            self._analytics_cache = (self._version, snapshot)
        return self._analytics_cache[1]

    @property
    def profit_margin(self) -> Decimal:
        return profit_margin(self.summary.revenue, self.summary.profit_loss)

    def recent_transactions(self, limit: int = 3) -> List[Transaction]:
        ordered = sorted(self.transactions, key=lambda t: t.created_at, reverse=True)
        return ordered[:limit]

    def close(self) -> None:
        self._executor.shutdown(wait=True)
