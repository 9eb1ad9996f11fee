"""
Layout primitives for consistent page structure.

Provides reusable components for page headers, sections and cards.
"""

import html
from contextlib import contextmanager
from typing import Callable, Optional

import streamlit as st


def page_header(title: str, subtitle: Optional[str] = None, right: Optional[Callable[[], None]] = None) -> None:
    """
    Render a consistent page header with title and optional subtitle.

    Args:
        title: Main page title
        subtitle: Optional subtitle/description text
        right: Optional callable that renders right-side content (e.g., buttons)
    """
    if right is not None:
        col_title, col_right = st.columns([3, 1])
        with col_title:
            _render_title(title, subtitle)
        with col_right:
            right()
    else:
        _render_title(title, subtitle)


def _render_title(title: str, subtitle: Optional[str]) -> None:
    st.markdown('<div class="chefbot-page-header">', unsafe_allow_html=True)
    st.markdown(f"# {title}")
    if subtitle:
        st.markdown(f'<div class="subtitle">{html.escape(subtitle)}</div>', unsafe_allow_html=True)
    st.markdown('</div>', unsafe_allow_html=True)


def section(title: str, caption: Optional[str] = None) -> None:
    """
    Render a section header with optional caption.

    Args:
        title: Section title
        caption: Optional caption/help text below title
    """
    st.markdown(f"## {title}")
    if caption:
        st.markdown(f'<div class="chefbot-section-caption">{html.escape(caption)}</div>', unsafe_allow_html=True)


@contextmanager
def card(title: Optional[str] = None):
    """
    Context manager for a bordered card container.

    Usage:
        with card("Ingredients"):
            st.write("...")
    """
    with st.container(border=True):
        if title:
            st.markdown(f"### {title}")
        yield
