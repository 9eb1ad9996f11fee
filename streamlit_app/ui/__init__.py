"""
UI Styling and Components Module.

This module provides global CSS styling and reusable UI components
for the Chefbot Streamlit app.
"""

from ui.styles import load_global_styles, pill_tag

__all__ = [
    "load_global_styles",
    "pill_tag",
]
