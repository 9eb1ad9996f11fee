"""
Recipe card component shared by the Home, Search and Saved Recipes pages.
"""

import streamlit as st

from chefbot.bookmarks import BookmarkStore
from chefbot.formatters import format_subtitle
from chefbot.models import Recipe
from chefbot.screen_state import BookmarkStatus, BookmarkToggle
from ui.styles import pill_tag
from utils.session import open_recipe


def render_bookmark_button(store: BookmarkStore, recipe: Recipe, key: str) -> None:
    """
    Render a save/unsave button for a recipe.

    The saved state is resolved from the bookmark store on every render; a
    failed write is shown as an error and leaves the state unchanged.
    """
    toggle = BookmarkToggle(recipe_id=recipe.id)
    toggle.resolve(store)
    saved = toggle.status == BookmarkStatus.SAVED
    label = "★ Saved" if saved else "☆ Save"

    if st.button(label, key=f"bookmark_{key}_{recipe.id}", use_container_width=True):
        toggle.toggle(store, recipe)
        if toggle.error:
            st.error(f"⚠️ Could not update your saved recipes: {toggle.error}")
        else:
            st.rerun()


def render_recipe_card(store: BookmarkStore, recipe: Recipe, key: str) -> None:
    """
    Render a compact recipe card with thumbnail, tags and actions.

    Args:
        store: Bookmark store used for the save button
        recipe: Recipe to show
        key: Unique key prefix for the card's widgets on this page
    """
    with st.container(border=True):
        if recipe.thumbnail_url:
            st.image(recipe.thumbnail_url, use_container_width=True)
        st.markdown(f"### {recipe.name}")

        subtitle = format_subtitle(recipe)
        if subtitle:
            st.caption(subtitle)

        tags = recipe.tag_set()
        if tags:
            st.markdown(" ".join(pill_tag(tag) for tag in tags), unsafe_allow_html=True)

        col_open, col_save = st.columns(2)
        with col_open:
            if st.button("📖 View recipe", key=f"open_{key}_{recipe.id}", use_container_width=True, type="primary"):
                open_recipe(recipe.id)
        with col_save:
            render_bookmark_button(store, recipe, key)
