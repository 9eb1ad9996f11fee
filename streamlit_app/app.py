"""
Chefbot - Streamlit Frontend Main Entry Point.

This is the main Streamlit application entry point. It sets up logging, the
page configuration and the sidebar with the saved-recipe count.

Note: Multi-page routing is handled automatically by Streamlit via the `pages/` folder.
Files in `pages/` starting with numbered prefixes (e.g., `01_🏠_Home.py`) will appear
as pages in the sidebar navigation.

Run with:
    streamlit run streamlit_app/app.py
"""

import logging
import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import chefbot
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
from chefbot import config

import streamlit as st

from ui.layout import page_header, section
from ui.styles import load_global_styles
from utils.session import get_bookmark_store

logging.basicConfig(
    level=config.get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Chefbot",
    page_icon="🍳",
    layout="centered",
    initial_sidebar_state="expanded"
)

load_global_styles()

store = get_bookmark_store()

with st.sidebar:
    st.markdown("### 🍳 **Chefbot**")
    st.divider()
    saved_count = len(store.list_all())
    st.markdown(f"**Saved recipes:** {saved_count}")
    if st.button("Open saved recipes", use_container_width=True, type="primary"):
        st.switch_page("pages/04_⭐_Saved_Recipes.py")

page_header("🍳 Chefbot", "Random recipes, search and a cookbook of your favourites.")

section("Where to start")
col_random, col_search, col_saved = st.columns(3)
with col_random:
    if st.button("🎲 Random recipe", use_container_width=True):
        st.switch_page("pages/01_🏠_Home.py")
with col_search:
    if st.button("🔍 Search", use_container_width=True):
        st.switch_page("pages/02_🔍_Search.py")
with col_saved:
    if st.button("⭐ Saved", use_container_width=True):
        st.switch_page("pages/04_⭐_Saved_Recipes.py")

st.caption("Recipe data from TheMealDB.")
