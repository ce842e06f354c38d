"""
Dashboard shell: header, summary cards and the four tabs.
"""

from datetime import date

import streamlit as st

from ..container import Container
from ..services.errors import KitchenTrackerError
from .auth import AuthComponents
from .charts import ChartComponents
from .forms import FormComponents
from .metrics import MetricComponents
from .notifications import show_error
from .restaurant import forget_restaurant_name, restaurant_name_manager
from .tables import TransactionTable


def _load(container: Container, force: bool = False) -> None:
    """Initial load once per login; later loads only on Refresh."""
    dashboard = container.get_dashboard_service()
    if dashboard.load_attempted and not force:
        if not dashboard.loaded:
            st.info("Dashboard data could not be loaded. Press Refresh to try again.")
        return
    with st.spinner("Loading your dashboard..."):
        try:
            if force:
                dashboard.refresh()
            else:
                dashboard.load_once()
        except KitchenTrackerError as e:
            show_error(container.get_error_handler(), e, "load dashboard data")


def _header(container: Container) -> None:
    col1, col2, col3, col4 = st.columns([6, 2, 1, 1])
    with col1:
        restaurant_name_manager(container)
    col2.caption(date.today().strftime("%B %Y"))
    if col3.button("Refresh"):
        forget_restaurant_name()
        _load(container, force=True)
    if col4.button("Logout"):
        forget_restaurant_name()
        AuthComponents.logout(container)


def render_dashboard(container: Container) -> None:
    _header(container)

    controller = container.get_session_controller()
    if controller.is_logged_in:
        _load(container)
    # a 401 from either call above ends the session
    if not controller.is_logged_in:
        forget_restaurant_name()
        st.warning("Your session has expired. Please login again.")
        if st.button("Go to login"):
            st.rerun()
        return

    dashboard = container.get_dashboard_service()
    MetricComponents.summary_cards(dashboard.summary, dashboard.profit_margin)

    overview, add, history, analytics = st.tabs(["Overview", "Add", "History", "Analytics"])
    with overview:
        MetricComponents.recent_activity(dashboard.recent_transactions())
    with add:
        FormComponents.add_transaction_form(container)
    with history:
        TransactionTable.render(container)
    with analytics:
        snapshot = dashboard.analytics
        MetricComponents.kpi_row(snapshot)
        ChartComponents.financial_overview(snapshot)
        col1, col2 = st.columns(2)
        with col1:
            ChartComponents.expense_categories(snapshot)
        with col2:
            ChartComponents.revenue_sources(snapshot)
