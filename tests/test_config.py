"""
Tests for environment-based configuration.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from chefbot.config import (
    DEFAULT_BOOKMARKS_KEY,
    DEFAULT_MEALDB_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    MealDBConfig,
    StorageConfig,
    get_log_level,
)


class TestMealDBConfig:
    """Test cases for recipe API settings."""

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        """Test the public API endpoint and 10 second timeout are the defaults."""
        assert MealDBConfig.get_base_url() == DEFAULT_MEALDB_BASE_URL
        assert MealDBConfig.get_timeout() == DEFAULT_TIMEOUT_SECONDS

    @patch.dict(os.environ, {"MEALDB_BASE_URL": "http://localhost:9000/api/"}, clear=True)
    def test_base_url_trailing_slash_removed(self):
        """Test a configured base URL has its trailing slash removed."""
        assert MealDBConfig.get_base_url() == "http://localhost:9000/api"

    @patch.dict(os.environ, {"MEALDB_TIMEOUT_SECONDS": "2.5"}, clear=True)
    def test_timeout_from_env(self):
        """Test a numeric timeout is parsed."""
        assert MealDBConfig.get_timeout() == 2.5

    @patch.dict(os.environ, {"MEALDB_TIMEOUT_SECONDS": "soon"}, clear=True)
    def test_invalid_timeout_falls_back(self):
        """Test a non-numeric timeout falls back to the default."""
        assert MealDBConfig.get_timeout() == DEFAULT_TIMEOUT_SECONDS

    @patch.dict(os.environ, {"MEALDB_TIMEOUT_SECONDS": "0"}, clear=True)
    def test_non_positive_timeout_falls_back(self):
        """Test a zero timeout falls back to the default."""
        assert MealDBConfig.get_timeout() == DEFAULT_TIMEOUT_SECONDS

    @pytest.mark.parametrize("raw", ["nan", "inf", "-inf"])
    def test_non_finite_timeout_falls_back(self, raw):
        """Test NaN and infinite timeouts fall back to the default."""
        with patch.dict(os.environ, {"MEALDB_TIMEOUT_SECONDS": raw}, clear=True):
            assert MealDBConfig.get_timeout() == DEFAULT_TIMEOUT_SECONDS


class TestStorageConfig:
    """Test cases for bookmark storage settings."""

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        """Test the default bookmark file and key."""
        assert StorageConfig.get_bookmarks_path() == Path("saved_recipes.json")
        assert StorageConfig.get_bookmarks_key() == DEFAULT_BOOKMARKS_KEY

    @patch.dict(
        os.environ,
        {"CHEFBOT_BOOKMARKS_PATH": "/data/bookmarks.json", "CHEFBOT_BOOKMARKS_KEY": "favourites"},
        clear=True,
    )
    def test_from_env(self):
        """Test bookmark path and key come from the environment."""
        assert StorageConfig.get_bookmarks_path() == Path("/data/bookmarks.json")
        assert StorageConfig.get_bookmarks_key() == "favourites"


@patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True)
def test_log_level_is_upper_cased():
    """Test LOG_LEVEL is normalized for logging.basicConfig."""
    assert get_log_level() == "DEBUG"
