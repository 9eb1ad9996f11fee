"""
Configuration management for Chefbot.

This module centralizes environment variable loading from the .env file at the
project root. It is imported by the connector and bookmark modules and by the
Streamlit entry point, so .env is loaded before anything reads the environment.

When no .env exists (e.g. in a deployed container), load_dotenv() is a no-op
and platform environment variables are used instead.

Environment Variables:
- MEALDB_BASE_URL: Optional, defaults to "https://www.themealdb.com/api/json/v1/1"
- MEALDB_TIMEOUT_SECONDS: Optional, HTTP timeout in seconds (default: 10)
- CHEFBOT_BOOKMARKS_PATH: Optional, bookmark file path (default: "saved_recipes.json")
- CHEFBOT_BOOKMARKS_KEY: Optional, storage key for the bookmark set (default: "saved_recipes")
- LOG_LEVEL: Optional, logging level for the Streamlit app (default: "INFO")
"""

import logging
import math
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_MEALDB_BASE_URL = "https://www.themealdb.com/api/json/v1/1"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_BOOKMARKS_PATH = "saved_recipes.json"
DEFAULT_BOOKMARKS_KEY = "saved_recipes"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    The project root is found by going up from this file's location
    (chefbot/config.py -> chefbot/ -> project root).

    Safe to call multiple times. Existing environment variables take precedence
    over values in .env (override=False).
    """
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


# Load .env file on module import
load_env_file()


class MealDBConfig:
    """Configuration for the TheMealDB connector."""

    @staticmethod
    def get_base_url() -> str:
        """
        Get the recipe API base URL.

        Returns:
            Base URL with trailing slash removed
        """
        url = os.getenv("MEALDB_BASE_URL") or DEFAULT_MEALDB_BASE_URL
        return url.rstrip("/")

    @staticmethod
    def get_timeout() -> float:
        """
        Get the HTTP timeout in seconds.

        Returns:
            Timeout from MEALDB_TIMEOUT_SECONDS, or 10.0 if unset, invalid,
            infinite, NaN or not positive
        """
        raw = os.getenv("MEALDB_TIMEOUT_SECONDS")
        if not raw:
            return DEFAULT_TIMEOUT_SECONDS
        try:
            timeout = float(raw)
        except ValueError:
            logger.warning("Invalid MEALDB_TIMEOUT_SECONDS=%r, using %.1f", raw, DEFAULT_TIMEOUT_SECONDS)
            return DEFAULT_TIMEOUT_SECONDS
        if not math.isfinite(timeout) or timeout <= 0:
            logger.warning("Non-finite or non-positive MEALDB_TIMEOUT_SECONDS=%r, using %.1f", raw, DEFAULT_TIMEOUT_SECONDS)
            return DEFAULT_TIMEOUT_SECONDS
        return timeout


class StorageConfig:
    """Configuration for local bookmark storage."""

    @staticmethod
    def get_bookmarks_path() -> Path:
        """Get the path of the JSON file holding the bookmark set."""
        return Path(os.getenv("CHEFBOT_BOOKMARKS_PATH") or DEFAULT_BOOKMARKS_PATH)

    @staticmethod
    def get_bookmarks_key() -> str:
        """Get the storage key the bookmark set is written under."""
        return os.getenv("CHEFBOT_BOOKMARKS_KEY") or DEFAULT_BOOKMARKS_KEY


def get_log_level() -> str:
    """Get the logging level name for the app (default: INFO)."""
    return (os.getenv("LOG_LEVEL") or "INFO").upper()
