"""
Domain Models

This module contains the transaction, authentication and analytics
models shared by the API clients, services and UI.
"""

from .base import BaseModel, MessageResponse
from .transaction import Transaction, TransactionKind, TransactionCreate, TransactionSummary
from .auth import AuthToken, OTPRequest, RestaurantProfile
from .analytics import AnalyticsSnapshot, BreakdownEntry, RadialPoint

__all__ = [
    "BaseModel",
    "MessageResponse",
    "Transaction",
    "TransactionKind",
    "TransactionCreate",
    "TransactionSummary",
    "AuthToken",
    "OTPRequest",
    "RestaurantProfile",
    "AnalyticsSnapshot",
    "BreakdownEntry",
    "RadialPoint",
]
