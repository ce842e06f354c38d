"""
Transaction and Summary Domain Models
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import Field, field_serializer, field_validator

from .base import BaseModel, decimal_to_number


class TransactionKind(str, Enum):
    """Transaction kind enumeration"""

    EXPENSE = "Expense"
    REVENUE = "Revenue"


class Transaction(BaseModel):
    """A transaction as stored by the backend.

    ``category_source`` holds an expense category for expenses and the
    revenue platform for revenue entries.
    """

    id: str
    kind: TransactionKind = Field(..., alias="type")
    description: str = ""
    category_source: str
    amount: Decimal = Field(..., ge=0)
    created_at: datetime

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> str:
        """Backends may hand out numeric ids."""
        if v is None:
            raise ValueError("Transaction id is required")
        return str(v)

    @property
    def is_expense(self) -> bool:
        return self.kind == TransactionKind.EXPENSE

    @property
    def is_revenue(self) -> bool:
        return self.kind == TransactionKind.REVENUE

    @field_serializer("amount")
    def serialize_amount(self, amount: Decimal) -> Any:
        return decimal_to_number(amount)


class TransactionCreate(BaseModel):
    """Request body for creating a transaction."""

    kind: TransactionKind = Field(..., alias="type")
    description: str = Field(..., min_length=1, max_length=500)
    category_source: str = Field(..., min_length=1, max_length=100)
    amount: Decimal = Field(..., gt=0, description="Transaction amount must be positive")

    @field_serializer("amount")
    def serialize_amount(self, amount: Decimal) -> Any:
        return decimal_to_number(amount)

    def to_payload(self) -> dict:
        """JSON body in the backend's field naming."""
        return self.model_dump(by_alias=True, mode="json")


class TransactionSummary(BaseModel):
    """Server-side totals for the account."""

    revenue: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")
    profit_loss: Decimal = Decimal("0")

    def is_consistent(self) -> bool:
        """Check profit_loss == revenue - expense."""
        return self.profit_loss == self.revenue - self.expense

    @classmethod
    def empty(cls) -> "TransactionSummary":
        return cls()
