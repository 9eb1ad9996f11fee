"""
Standardized feedback utilities for consistent error, empty, and loading states.

Provides reusable components for displaying errors (with retry or go-back
actions), empty states, and loading indicators across all pages.
"""

from contextlib import contextmanager
from typing import Callable, Optional

import streamlit as st

from chefbot.screen_state import Phase, ScreenState


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display a standardized error message with optional hint.

    Args:
        message: Main error message to display
        hint: Optional hint text to help users resolve the issue
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_empty_state(
    title: str,
    subtitle: Optional[str] = None,
    action_label: str = "Get started",
    action_page_path: Optional[str] = None
) -> None:
    """
    Display a standardized empty state with optional action button.

    Args:
        title: Main empty state title
        subtitle: Optional subtitle/description text
        action_label: Label for the action button
        action_page_path: Optional page path to navigate to when button is clicked
    """
    st.info(f"📭 **{title}**")
    if subtitle:
        st.caption(subtitle)

    if action_page_path:
        if st.button(action_label, use_container_width=True, type="primary"):
            st.switch_page(action_page_path)


@contextmanager
def working_spinner(label: str = "Working…"):
    """
    Context manager wrapper for standardized loading spinners.

    Usage:
        with working_spinner("Loading recipe…"):
            state.run(loader)
    """
    with st.spinner(label):
        yield


def render_load_failure(
    state: ScreenState,
    on_retry: Callable[[], None],
    key: str,
    back_page_path: Optional[str] = None,
) -> bool:
    """
    Render the ERROR phase of a ScreenState.

    Retryable failures get a "Try again" button that calls on_retry; a
    not-found lookup gets a "Go back" button instead.

    Returns:
        True if an error was rendered (the caller should stop rendering content)
    """
    if state.phase != Phase.ERROR:
        return False

    show_error(state.error or "Something went wrong")
    if state.retryable:
        if st.button("🔄 Try again", key=f"retry_{key}", type="primary"):
            on_retry()
            st.rerun()
    elif back_page_path:
        if st.button("⬅️ Go back", key=f"back_{key}"):
            st.switch_page(back_page_path)
    return True
