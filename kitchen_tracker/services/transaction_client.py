"""
Transaction API client.

The bearer token is attached when one is stored and silently omitted
otherwise; authorization is enforced by the backend.
"""

from typing import List

from pydantic import ValidationError as PayloadError

from ..models.transaction import Transaction, TransactionCreate, TransactionSummary
from .api_client import ApiClient, is_success, response_text
from .errors import ServiceError


class TransactionClient(ApiClient):
    """Client for the /transactions endpoints."""

    def _check(self, response, action: str) -> None:
        if not is_success(response):
            raise ServiceError(f"Failed to {action}", response.status_code, response_text(response))

    def list_transactions(self) -> List[Transaction]:
        response = self._request("GET", "/transactions", token=self.session_store.get())
        self._check(response, "fetch transactions")
        data = self._json(response, "fetch transactions")
        if not isinstance(data, list):
            raise ServiceError("Unexpected transactions payload", response.status_code, response_text(response))
        try:
            return [Transaction.model_validate(item) for item in data]
        except PayloadError as e:
            raise ServiceError(f"Unexpected transactions payload ({e.error_count()} errors)", response.status_code) from e

    def get_summary(self) -> TransactionSummary:
        response = self._request("GET", "/transactions/summary", token=self.session_store.get())
        self._check(response, "fetch transaction summary")
        try:
            return TransactionSummary.model_validate(self._json(response, "fetch transaction summary"))
        except PayloadError as e:
            raise ServiceError(f"Unexpected summary payload ({e.error_count()} errors)", response.status_code) from e

    def create_transaction(self, transaction: TransactionCreate) -> None:
        """Create a transaction.

        No idempotency key is sent, so a retried submission can create a
        duplicate record.
        """
        response = self._request(
            "POST",
            "/transactions",
            token=self.session_store.get(),
            json=transaction.to_payload(),
        )
        self._check(response, "create transaction")

    def delete_transaction(self, transaction_id: str) -> None:
        response = self._request(
            "DELETE",
            f"/transactions/{transaction_id}",
            token=self.session_store.get(),
        )
        self._check(response, "delete transaction")
