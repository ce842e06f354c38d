"""
Services package initialization.

This module provides access to the API clients, session controller and
dashboard services used by the application.
"""

from .errors import (
    KitchenTrackerError,
    ValidationError,
    AuthError,
    ServiceError,
    NetworkError,
    InvalidStateError,
)
from .auth_client import AuthClient
from .transaction_client import TransactionClient
from .session_controller import SessionController, SessionState, LoginStep, ResendCooldown
from .analytics_service import AnalyticsService
from .dashboard_service import DashboardService
from .error_handler import ErrorHandler

__all__ = [
    "KitchenTrackerError",
    "ValidationError",
    "AuthError",
    "ServiceError",
    "NetworkError",
    "InvalidStateError",
    "AuthClient",
    "TransactionClient",
    "SessionController",
    "SessionState",
    "LoginStep",
    "ResendCooldown",
    "AnalyticsService",
    "DashboardService",
    "ErrorHandler",
]
