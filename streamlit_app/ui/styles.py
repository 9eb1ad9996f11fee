"""
Global CSS styling for Chefbot.

This module provides load_global_styles() to inject consistent styling
across all pages: typography, header spacing and tag pills.
"""

import html

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the Chefbot app.

    This function:
    - Imports Google Fonts (Nunito) for friendly typography
    - Styles page headers and section captions
    - Defines the pill style used for recipe tags
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;700&display=swap');

        html, body, [class*="css"] {
            font-family: 'Nunito', 'sans serif' !important;
        }

        h1, h2, h3, h4, h5, h6 {
            font-weight: 600 !important;
            letter-spacing: 0.02em !important;
        }

        .chefbot-page-header .subtitle {
            color: #6b7280;
            font-size: 1.05rem;
            margin-top: -0.5rem;
            margin-bottom: 1.5rem;
        }

        .chefbot-section-caption {
            color: #6b7280;
            font-size: 0.9rem;
            margin-bottom: 0.75rem;
        }

        .pill-tag {
            display: inline-block;
            padding: 0.1rem 0.6rem;
            margin: 0 0.25rem 0.25rem 0;
            border-radius: 999px;
            background: #fef3c7;
            color: #92400e;
            font-size: 0.8rem;
            font-weight: 600;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)


def pill_tag(text: str) -> str:
    """
    Create HTML for a small rounded pill tag (e.g., a recipe tag).

    Args:
        text: Text to display in the tag

    Returns:
        HTML string for the pill tag
    """
    return f'<span class="pill-tag">{html.escape(text)}</span>'
