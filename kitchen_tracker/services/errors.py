"""
Exception hierarchy for the expense tracker.

Every failure surfaced to the UI is one of these; none are retried.
"""

from typing import Any, Optional


class KitchenTrackerError(Exception):
    """Base class for all application errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(KitchenTrackerError):
    """Client-side input rejected before any network call."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class AuthError(KitchenTrackerError):
    """Missing, invalid or expired credential."""


class ServiceError(KitchenTrackerError):
    """Non-success HTTP response from the backend."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        detail = message
        if status_code is not None:
            detail = f"{message}: {status_code}"
            if body:
                detail = f"{detail} - {body}"
        super().__init__(detail)
        self.status_code = status_code
        self.body = body

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code == 401


class NetworkError(KitchenTrackerError):
    """Transport-level failure such as no connectivity."""


class InvalidStateError(KitchenTrackerError):
    """Session operation attempted from the wrong state."""
