"""
Streamlit UI components for the expense tracker.
"""
