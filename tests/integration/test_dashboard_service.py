"""
Integration tests for the dashboard state service
"""

from decimal import Decimal
from unittest.mock import Mock

import pytest

from kitchen_tracker.models.transaction import TransactionCreate, TransactionKind, TransactionSummary
from kitchen_tracker.services.analytics_service import AnalyticsService
from kitchen_tracker.services.dashboard_service import DashboardService
from kitchen_tracker.services.errors import NetworkError, ServiceError
from kitchen_tracker.services.transaction_client import TransactionClient


@pytest.fixture
def summary():
    return TransactionSummary(revenue=Decimal("500"), expense=Decimal("350"), profit_loss=Decimal("150"))


@pytest.fixture
def client(sample_transactions, summary):
    client = Mock(spec=TransactionClient)
    client.list_transactions.return_value = sample_transactions
    client.get_summary.return_value = summary
    return client


@pytest.fixture
def on_auth_failure():
    return Mock()


@pytest.fixture
def dashboard(client, on_auth_failure):
    return DashboardService(client, on_auth_failure=on_auth_failure)


@pytest.fixture
def new_expense():
    return TransactionCreate(
        kind=TransactionKind.EXPENSE,
        description="Gas",
        category_source="Utilities",
        amount=Decimal("40"),
    )


@pytest.mark.integration
class TestRefresh:
    """Concurrent load of list and summary"""

    def test_initial_state(self, dashboard):
        assert not dashboard.loaded
        assert dashboard.transactions == []
        assert dashboard.summary.revenue == Decimal("0")

    def test_refresh_loads_both(self, dashboard, sample_transactions, summary):
        dashboard.refresh()

        assert dashboard.loaded
        assert dashboard.transactions == sample_transactions
        assert dashboard.summary == summary
        assert dashboard.profit_margin == Decimal("30.0")

    def test_refresh_all_or_nothing(self, dashboard, client):
        dashboard.refresh()
        before = list(dashboard.transactions)

        client.list_transactions.return_value = []
        client.get_summary.side_effect = NetworkError("offline")
        with pytest.raises(NetworkError):
            dashboard.refresh()

        assert dashboard.transactions == before
        assert dashboard.summary.revenue == Decimal("500")

    def test_recent_transactions(self, dashboard):
        dashboard.refresh()
        assert [t.id for t in dashboard.recent_transactions()] == ["4", "3", "2"]


@pytest.mark.integration
class TestMutations:
    """Create and delete followed by a refresh"""

    def test_add_refreshes(self, dashboard, client, new_expense):
        dashboard.add_transaction(new_expense)

        client.create_transaction.assert_called_once_with(new_expense)
        client.list_transactions.assert_called_once()
        assert dashboard.loaded

    def test_failed_add_does_not_refresh(self, dashboard, client, new_expense):
        client.create_transaction.side_effect = ServiceError("Failed to create transaction", 500)

        with pytest.raises(ServiceError):
            dashboard.add_transaction(new_expense)
        client.list_transactions.assert_not_called()

    def test_delete_refreshes(self, dashboard, client, sample_transactions):
        dashboard.refresh()
        client.list_transactions.return_value = sample_transactions[1:]

        dashboard.delete_transaction("1")

        client.delete_transaction.assert_called_once_with("1")
        assert [t.id for t in dashboard.transactions] == ["2", "3", "4"]

    def test_failed_delete_leaves_list(self, dashboard, client, sample_transactions):
        dashboard.refresh()
        client.delete_transaction.side_effect = ServiceError("Failed to delete transaction", 404)

        with pytest.raises(ServiceError):
            dashboard.delete_transaction("1")
        assert dashboard.transactions == sample_transactions
        assert client.list_transactions.call_count == 1


@pytest.mark.integration
class TestAuthFailure:
    """Rejected credentials during a session"""

    def test_unauthorized_refresh_triggers_callback(self, dashboard, client, on_auth_failure):
        client.list_transactions.side_effect = ServiceError("Failed to fetch transactions", 401)

        with pytest.raises(ServiceError):
            dashboard.refresh()
        on_auth_failure.assert_called_once()

    def test_other_errors_do_not_expire(self, dashboard, client, on_auth_failure):
        client.get_summary.side_effect = ServiceError("Failed to fetch transaction summary", 500)

        with pytest.raises(ServiceError):
            dashboard.refresh()
        on_auth_failure.assert_not_called()


@pytest.mark.integration
class TestAnalyticsCache:
    """Analytics recomputed once per refresh"""

    def test_memoized_until_refresh(self, client):
        analytics_service = Mock(wraps=AnalyticsService())
        dashboard = DashboardService(client, analytics_service)
        dashboard.refresh()

        first = dashboard.analytics
        assert dashboard.analytics is first
        assert analytics_service.summarize.call_count == 1

        dashboard.refresh()
        assert dashboard.analytics is not first
        assert analytics_service.summarize.call_count == 2

    def test_snapshot_values(self, dashboard):
        dashboard.refresh()
        snapshot = dashboard.analytics

        assert snapshot.total_expenses == Decimal("350")
        assert snapshot.expense_category_map() == {"Food": Decimal("150"), "Rent": Decimal("200")}


@pytest.mark.integration
class TestInitialLoad:
    """Initial load is sent once; failures wait for an explicit refresh"""

    def test_load_once_fetches_first_time(self, dashboard, client):
        assert dashboard.load_once() is True
        assert dashboard.load_once() is False

        assert client.get_summary.call_count == 1
        assert client.list_transactions.call_count == 1

    def test_failed_load_not_repeated(self, dashboard, client):
        client.get_summary.side_effect = ServiceError("Server unavailable", status_code=500)

        with pytest.raises(ServiceError):
            dashboard.load_once()
        assert dashboard.load_attempted
        assert not dashboard.loaded

        assert dashboard.load_once() is False
        assert dashboard.load_once() is False
        assert client.get_summary.call_count == 1

    def test_refresh_retries_after_failure(self, dashboard, client, summary):
        client.get_summary.side_effect = ServiceError("Server unavailable", status_code=500)
        with pytest.raises(ServiceError):
            dashboard.load_once()

        client.get_summary.side_effect = None
        dashboard.refresh()

        assert dashboard.loaded
        assert dashboard.summary == summary
        assert client.get_summary.call_count == 2

    def test_close_stops_workers(self, dashboard):
        dashboard.refresh()
        dashboard.close()

        with pytest.raises(RuntimeError):
            dashboard.refresh()
