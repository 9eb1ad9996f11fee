"""
Tests for the per-screen state machines.

These tests verify that:
- A screen starts in LOADING and moves to SUCCESS or ERROR
- Retry is just another run() and can recover from ERROR
- Stale results and results for closed screens are discarded
- The bookmark toggle resolves from the store and only flips on a successful write
"""

import pytest

from chefbot.bookmarks import BookmarkStore
from chefbot.errors import StorageWriteError
from chefbot.fetch import FetchResult
from chefbot.models import Recipe
from chefbot.screen_state import BookmarkStatus, BookmarkToggle, Phase, ScreenState
from chefbot.storage import MemoryStore

TERIYAKI = Recipe(id="52772", name="Teriyaki Chicken")
HANDI = Recipe(id="52795", name="Chicken Handi")


def ok(*recipes: Recipe) -> FetchResult:
    return FetchResult(status="ok", recipes=list(recipes))


class FailingWriteStore(MemoryStore):
    def set(self, key: str, value: str) -> None:
        raise StorageWriteError("read-only file system")


class TestScreenState:
    """Test cases for the loading -> success/error -> retry cycle."""

    def test_starts_loading(self):
        """Test a new screen is in LOADING with nothing to show."""
        state = ScreenState()
        assert state.phase == Phase.LOADING
        assert state.recipe is None
        assert state.active

    def test_success(self):
        """Test an ok result moves the screen to SUCCESS."""
        state = ScreenState()
        assert state.run(lambda: ok(TERIYAKI))
        assert state.phase == Phase.SUCCESS
        assert state.recipe == TERIYAKI
        assert state.error is None

    def test_empty_search_is_success(self):
        """Test an ok result with no recipes is still SUCCESS."""
        state = ScreenState()
        state.run(lambda: ok())
        assert state.phase == Phase.SUCCESS
        assert state.recipes == []

    def test_error_then_retry(self):
        """Test a failed load shows a retryable error and a retry recovers."""
        state = ScreenState()
        state.run(lambda: FetchResult(status="network_error", message="Cannot reach the recipe service"))

        assert state.phase == Phase.ERROR
        assert state.error == "Cannot reach the recipe service"
        assert state.retryable

        state.run(lambda: ok(TERIYAKI))
        assert state.phase == Phase.SUCCESS
        assert state.error is None
        assert state.recipe == TERIYAKI

    def test_not_found_is_not_retryable(self):
        """Test a not_found result asks the UI to go back instead of retrying."""
        state = ScreenState()
        state.run(lambda: FetchResult(status="not_found", message="Recipe '999999' was not found"))
        assert state.phase == Phase.ERROR
        assert not state.retryable
        assert state.status == "not_found"

    def test_error_without_message_gets_default(self):
        """Test an error result with no message still shows some text."""
        state = ScreenState()
        state.run(lambda: FetchResult(status="empty"))
        assert state.error

    def test_begin_load_clears_error(self):
        """Test starting a new load returns to LOADING and clears the old error."""
        state = ScreenState()
        state.run(lambda: FetchResult(status="empty", message="no recipe"))
        state.begin_load()
        assert state.phase == Phase.LOADING
        assert state.error is None

    def test_stale_result_is_discarded(self):
        """Test a slow first response cannot overwrite a newer one."""
        state = ScreenState()
        first = state.begin_load()
        second = state.begin_load()

        assert state.apply(second, ok(HANDI))
        assert not state.apply(first, ok(TERIYAKI))
        assert state.recipe == HANDI

    def test_result_after_close_is_discarded(self):
        """Test a result arriving after the screen closed is not applied."""
        state = ScreenState()
        token = state.begin_load()
        state.close()

        assert not state.apply(token, ok(TERIYAKI))
        assert state.phase == Phase.LOADING
        assert state.recipe is None


class TestBookmarkToggle:
    """Test cases for the Unknown -> Saved/NotSaved toggle."""

    def test_starts_unknown_and_resolves(self):
        """Test the toggle leaves UNKNOWN once checked against the store."""
        store = BookmarkStore(MemoryStore(), key="saved_recipes")
        toggle = BookmarkToggle(recipe_id="52772")
        assert toggle.status == BookmarkStatus.UNKNOWN

        assert toggle.resolve(store) == BookmarkStatus.NOT_SAVED
        store.upsert(TERIYAKI)
        assert toggle.resolve(store) == BookmarkStatus.SAVED

    def test_toggle_flips_state(self):
        """Test toggling saves and then unsaves the recipe."""
        store = BookmarkStore(MemoryStore(), key="saved_recipes")
        toggle = BookmarkToggle(recipe_id="52772")

        assert toggle.toggle(store, TERIYAKI) == BookmarkStatus.SAVED
        assert store.contains("52772")
        assert toggle.toggle(store, TERIYAKI) == BookmarkStatus.NOT_SAVED
        assert not store.contains("52772")

    def test_failed_write_keeps_state(self):
        """Test a failed write leaves the status unchanged and records the error."""
        store = BookmarkStore(FailingWriteStore(), key="saved_recipes")
        toggle = BookmarkToggle(recipe_id="52772")
        toggle.resolve(store)

        assert toggle.toggle(store, TERIYAKI) == BookmarkStatus.NOT_SAVED
        assert toggle.error == "read-only file system"

    def test_wrong_recipe_rejected(self):
        """Test a toggle refuses a recipe with a different id."""
        store = BookmarkStore(MemoryStore(), key="saved_recipes")
        with pytest.raises(ValueError):
            BookmarkToggle(recipe_id="52772").toggle(store, HANDI)
