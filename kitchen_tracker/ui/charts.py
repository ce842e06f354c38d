"""
Chart components for the analytics tab.

Figure builders are plain functions returning plotly figures so they can
be exercised without a running Streamlit server.
"""

from typing import List, Optional

import plotly.graph_objects as go
import streamlit as st

from ..models.analytics import AnalyticsSnapshot, BreakdownEntry
from ..services.analytics_service import CHART_COLORS, EXPENSE_COLORS
from ..utils.currency_utils import CURRENCY_SYMBOL


def radial_figure(snapshot: AnalyticsSnapshot, height: int = 320) -> go.Figure:
    """Revenue, expenses and profit as percentages of the largest of the three."""
    points = snapshot.radial
    fig = go.Figure(
        go.Barpolar(
            r=[float(p.percentage) for p in points],
            theta=[p.name for p in points],
            marker_color=[p.color for p in points],
            customdata=[float(p.value) for p in points],
            hovertemplate=f"%{{theta}}: {CURRENCY_SYMBOL}%{{customdata:,.0f}}<extra></extra>",
        )
    )
    fig.update_layout(
        height=height,
        showlegend=False,
        polar=dict(radialaxis=dict(range=[0, 100], showticklabels=False)),
        margin=dict(l=20, r=20, t=20, b=20),
    )
    return fig


def breakdown_figure(
    entries: List[BreakdownEntry],
    colors: Optional[List[str]] = None,
    height: int = 320,
) -> go.Figure:
    """Donut of summed amounts per category or source."""
    palette = colors or CHART_COLORS
    fig = go.Figure(
        go.Pie(
            labels=[e.name for e in entries],
            values=[float(e.value) for e in entries],
            hole=0.45,
            marker=dict(colors=[palette[i % len(palette)] for i in range(len(entries))]),
            textinfo="percent+label",
            textposition="inside",
        )
    )
    fig.update_layout(height=height, margin=dict(l=20, r=20, t=20, b=20))
    return fig


class ChartComponents:
    """Streamlit wrappers around the figure builders."""

    @staticmethod
    def financial_overview(snapshot: AnalyticsSnapshot) -> None:
        st.markdown("**Financial Overview**")
        st.caption("Radial comparison of revenue, expenses, and profit")
        if not snapshot.has_data:
            st.info("No data available. Add transactions to see charts")
            return
        st.plotly_chart(radial_figure(snapshot), use_container_width=True)

    @staticmethod
    def expense_categories(snapshot: AnalyticsSnapshot) -> None:
        st.markdown("**Expense Categories**")
        if not snapshot.expense_categories:
            st.info("No expenses recorded yet")
            return
        st.plotly_chart(
            breakdown_figure(snapshot.expense_categories, EXPENSE_COLORS),
            use_container_width=True,
        )

    @staticmethod
    def revenue_sources(snapshot: AnalyticsSnapshot) -> None:
        st.markdown("**Revenue Sources**")
        if not snapshot.revenue_sources:
            st.info("No revenue recorded yet")
            return
        st.plotly_chart(
            breakdown_figure(snapshot.revenue_sources, CHART_COLORS),
            use_container_width=True,
        )
