"""
Session management utilities for Streamlit pages.

This module keeps the long-lived objects every page needs in st.session_state,
so they survive page navigation within one browser session:

- the recipe source (TheMealDB connector)
- the bookmark store (backed by the JSON file from CHEFBOT_BOOKMARKS_PATH),
  cached once per server process and shared across sessions
- one ScreenState per page, plus the recipe currently selected for the details page

The bookmark file is the source of truth for saved recipes; session state only
holds display state.
"""

from typing import Optional

import streamlit as st

from chefbot.bookmarks import BookmarkStore
from chefbot.config import StorageConfig
from chefbot.connectors import MealDBConnector
from chefbot.connectors.base import BaseRecipeSource
from chefbot.screen_state import ScreenState
from chefbot.storage import JsonFileStore

SOURCE_KEY = "recipe_source"
SELECTED_RECIPE_KEY = "selected_recipe_id"
SCREEN_STATE_PREFIX = "screen_state:"

DETAILS_PAGE = "pages/03_📖_Recipe_Details.py"


def get_recipe_source() -> BaseRecipeSource:
    """Get or create the session's recipe source."""
    if SOURCE_KEY not in st.session_state:
        st.session_state[SOURCE_KEY] = MealDBConnector()
    return st.session_state[SOURCE_KEY]


@st.cache_resource
def _shared_bookmark_store(path: str, key: str) -> BookmarkStore:
    return BookmarkStore(JsonFileStore(path), key=key)


def get_bookmark_store() -> BookmarkStore:
    """Get the bookmark store shared by every session writing the same file."""
    return _shared_bookmark_store(
        str(StorageConfig.get_bookmarks_path()), StorageConfig.get_bookmarks_key()
    )


def get_screen_state(page_key: str) -> tuple[ScreenState, bool]:
    """
    Get the ScreenState for a page, creating it on first visit.

    Returns:
        Tuple of (state, created). created is True when the page should start
        its initial load.
    """
    key = SCREEN_STATE_PREFIX + page_key
    if key not in st.session_state:
        st.session_state[key] = ScreenState()
        return st.session_state[key], True
    return st.session_state[key], False


def close_screen(page_key: str) -> None:
    """Close a page's ScreenState and forget it, so the next visit loads fresh."""
    key = SCREEN_STATE_PREFIX + page_key
    state = st.session_state.pop(key, None)
    if state is not None:
        state.close()


def get_selected_recipe_id() -> Optional[str]:
    return st.session_state.get(SELECTED_RECIPE_KEY)


def open_recipe(recipe_id: str) -> None:
    """Select a recipe and navigate to the details page."""
    if st.session_state.get(SELECTED_RECIPE_KEY) != recipe_id:
        close_screen("details")
    st.session_state[SELECTED_RECIPE_KEY] = recipe_id
    st.switch_page(DETAILS_PAGE)
