"""
Cloud Kitchen Expense Tracker - Streamlit entry point.

Run with: streamlit run app.py
"""

import streamlit as st

from kitchen_tracker.config.settings import Settings
from kitchen_tracker.container import Container
from kitchen_tracker.ui.auth import AuthComponents
from kitchen_tracker.ui.dashboard import render_dashboard
from kitchen_tracker.ui.notifications import flush_notifications

settings = Settings()

# Configure page
st.set_page_config(
    page_title=settings.app.page_title,
    page_icon=settings.app.page_icon,
    layout="wide",
    initial_sidebar_state="collapsed",
)


def get_container() -> Container:
    """One container per browser session."""
    if "container" not in st.session_state:
        container = Container(settings)
        container.configure_logging()
        st.session_state["container"] = container
    return st.session_state["container"]


def main():
    container = get_container()
    flush_notifications()

    if not AuthComponents.require_authentication(container):
        return

    render_dashboard(container)


if __name__ == "__main__":
    main()
