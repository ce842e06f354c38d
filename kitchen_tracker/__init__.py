"""
Cloud Kitchen Expense Tracker

Streamlit dashboard and client library for tracking the expenses and platform
payouts of a cloud kitchen against a remote REST backend.
"""

__version__ = "1.0.0"
__author__ = "Cloud Kitchen Team"
