"""
Toast-style user notifications.
"""

from typing import Optional

import streamlit as st

from ..services.error_handler import ErrorHandler

_PENDING_KEY = "pending_notifications"


def notify_success(message: str, title: str = "Success") -> None:
    """Queue a success toast that survives the next st.rerun()."""
    st.session_state.setdefault(_PENDING_KEY, []).append(f"✅ {title}: {message}")


def show_error(
    error_handler: ErrorHandler,
    exception: Exception,
    context: Optional[str] = None,
) -> dict:
    """Log an exception and show its user-facing message."""
    notification = error_handler.handle_exception(exception, context)
    st.error(
        f"❌ {notification['title']}: {notification['message']} "
        f"(Error ID: {notification['error_id']})"
    )
    return notification


def flush_notifications() -> None:
    for message in st.session_state.pop(_PENDING_KEY, []):
        st.toast(message)
