"""
Pytest configuration and fixtures for the Expense Tracker test suite
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import Mock

import pytest
import requests

from kitchen_tracker.config.settings import ApiConfig, SessionConfig, Settings
from kitchen_tracker.models.transaction import Transaction, TransactionKind
from kitchen_tracker.security.session_store import SessionStore

TEST_BASE_URL = "https://backend.test/api"


def make_response(status_code: int = 200, json=None, text: str = ""):
    """Build a mock requests.Response."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.text = text
    if json is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = json
    return response


def make_transaction(
    id="1",
    kind=TransactionKind.EXPENSE,
    category_source="Food",
    amount="100",
    description="",
    days_ago=0,
):
    return Transaction(
        id=id,
        kind=kind,
        description=description or f"{category_source} entry",
        category_source=category_source,
        amount=Decimal(amount),
        created_at=datetime(2024, 6, 30, 12, 0, tzinfo=timezone.utc) - timedelta(days=days_ago),
    )


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a fake backend and a temporary storage file"""
    return Settings(
        api=ApiConfig(base_url=TEST_BASE_URL),
        session=SessionConfig(
            storage_path=str(tmp_path / "local_storage.json"),
            resend_cooldown_seconds=60,
        ),
    )


@pytest.fixture
def session_store(tmp_path):
    return SessionStore(tmp_path / "local_storage.json")


@pytest.fixture
def logged_in_store(session_store):
    session_store.set("tok-123")
    return session_store


@pytest.fixture
def mock_http():
    """requests.Session double; configure .request per test"""
    return Mock(spec=requests.Session)


@pytest.fixture
def sample_transactions():
    """Three expenses and one payout"""
    return [
        make_transaction("1", TransactionKind.EXPENSE, "Food", "50", days_ago=3),
        make_transaction("2", TransactionKind.EXPENSE, "Rent", "200", days_ago=2),
        make_transaction("3", TransactionKind.EXPENSE, "Food", "100", days_ago=1),
        make_transaction("4", TransactionKind.REVENUE, "Zomato", "500", days_ago=0),
    ]


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def transaction_factory():
    return make_transaction
