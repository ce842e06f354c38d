"""
Error handling service: turns exceptions into user-facing notifications.
"""

import uuid
from datetime import datetime
from typing import Any, Dict, Optional

from ..security.pii_protection import get_structured_logger
from .errors import (
    AuthError,
    InvalidStateError,
    KitchenTrackerError,
    NetworkError,
    ServiceError,
    ValidationError,
)

logger = get_structured_logger().get_logger(__name__)

_TITLES = {
    ValidationError: "Invalid Input",
    AuthError: "Authentication Error",
    ServiceError: "Error",
    NetworkError: "Connection Error",
    InvalidStateError: "Error",
}


class ErrorHandler:
    """Centralized error handling service."""

    def __init__(self):
        self.logger = logger

    def handle_exception(
        self,
        exception: Exception,
        context: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Log the exception and build the notification shown to the user."""
        error_id = self._generate_error_id()
        log = self.logger.warning if isinstance(exception, ValidationError) else self.logger.error
        log(
            "Exception occurred",
            error_id=error_id,
            error_type=type(exception).__name__,
            context=context or "unknown context",
            status_code=getattr(exception, "status_code", None),
        )

        notification = {
            "success": False,
            "error_id": error_id,
            "title": self._get_title(exception),
            "message": self._get_user_friendly_message(exception),
            "type": type(exception).__name__,
            "timestamp": datetime.now().isoformat(),
        }
        if isinstance(exception, ValidationError) and exception.field:
            notification["field"] = exception.field
        if isinstance(exception, AuthError):
            notification["requires_login"] = True
        if isinstance(exception, ServiceError) and exception.is_unauthorized:
            notification["requires_login"] = True
        return notification

    def _generate_error_id(self) -> str:
        """Generate unique error ID for tracking."""
        return str(uuid.uuid4())[:8]

    def _get_title(self, exception: Exception) -> str:
        for error_type, title in _TITLES.items():
            if isinstance(exception, error_type):
                return title
        return "Error"

    def _get_user_friendly_message(self, exception: Exception) -> str:
        if isinstance(exception, NetworkError):
            return "Could not reach the server. Please check your connection and try again."
        if isinstance(exception, KitchenTrackerError):
            return exception.message
        return "An unexpected error occurred. Please try again."

