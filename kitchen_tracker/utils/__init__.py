"""
Utility helpers for formatting and table views.
"""
