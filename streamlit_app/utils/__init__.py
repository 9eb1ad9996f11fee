"""
Utility modules for the Streamlit frontend.

This package contains:
- session: session-scoped recipe source, bookmark store and page state
"""
