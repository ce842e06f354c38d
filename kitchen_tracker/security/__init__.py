"""
Security package: session token persistence and log redaction.
"""

from .session_store import SessionStore
from .pii_protection import get_structured_logger, configure_logging

__all__ = [
    "SessionStore",
    "get_structured_logger",
    "configure_logging",
]
