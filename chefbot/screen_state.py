"""
Per-screen state machines shared by every page.

ScreenState is the fetch-and-render cycle each recipe screen repeats:

    LOADING --ok--> SUCCESS
    LOADING --failure--> ERROR --retry--> LOADING

Each load gets a token. A result is applied only if its token is the newest
one and the screen is still open, so a slow response cannot overwrite a newer
one or update a closed screen. In-flight calls are not aborted; their results
are just dropped.

BookmarkToggle tracks whether the recipe on screen is saved:

    UNKNOWN --resolve--> SAVED | NOT_SAVED
    SAVED <--toggle--> NOT_SAVED   (only when the write succeeded)
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from chefbot.bookmarks import BookmarkStore
from chefbot.fetch import FetchResult
from chefbot.models import Recipe

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Something went wrong while loading the recipe"


class Phase(str, Enum):
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class BookmarkStatus(str, Enum):
    UNKNOWN = "unknown"
    SAVED = "saved"
    NOT_SAVED = "not_saved"


@dataclass
class ScreenState:
    """
    Display state of one screen that loads recipes.

    Attributes:
        phase: Current phase (starts in LOADING, as screens load on open)
        recipes: Recipes from the last successful load
        error: Message from the last failed load
        status: FetchResult status of the last applied result
        retryable: Whether the UI should offer "retry" (otherwise "go back")
        generation: Token of the newest load
        active: False once the screen has been closed
    """
    phase: Phase = Phase.LOADING
    recipes: List[Recipe] = field(default_factory=list)
    error: Optional[str] = None
    status: Optional[str] = None
    retryable: bool = False
    generation: int = 0
    active: bool = True

    @property
    def recipe(self) -> Optional[Recipe]:
        return self.recipes[0] if self.recipes else None

    def begin_load(self) -> int:
        """Enter LOADING and return the token for this load."""
        self.generation += 1
        self.phase = Phase.LOADING
        self.error = None
        return self.generation

    def apply(self, token: int, result: FetchResult) -> bool:
        """
        Apply a fetch result if it belongs to the newest load of an open screen.

        Returns:
            True if the result was applied, False if it was discarded as stale
        """
        if not self.active:
            logger.debug("Discarding result for closed screen (token=%d)", token)
            return False
        if token != self.generation:
            logger.debug("Discarding stale result (token=%d, current=%d)", token, self.generation)
            return False

        self.status = result.status
        if result.ok:
            self.phase = Phase.SUCCESS
            self.recipes = list(result.recipes)
            self.error = None
            self.retryable = False
        else:
            self.phase = Phase.ERROR
            self.recipes = []
            self.error = result.message or DEFAULT_ERROR_MESSAGE
            self.retryable = result.retryable
        return True

    def run(self, loader: Callable[[], FetchResult]) -> bool:
        """
        Load and apply in one step. Calling run() again is the retry action.

        Args:
            loader: Zero-argument callable returning a FetchResult

        Returns:
            True if the result was applied
        """
        token = self.begin_load()
        return self.apply(token, loader())

    def close(self) -> None:
        """Mark the screen as closed; results arriving later are discarded."""
        self.active = False


@dataclass
class BookmarkToggle:
    """Saved/not-saved state of one recipe shown on a screen."""
    recipe_id: str
    status: BookmarkStatus = BookmarkStatus.UNKNOWN
    error: Optional[str] = None

    def resolve(self, store: BookmarkStore) -> BookmarkStatus:
        """Leave UNKNOWN by checking the bookmark store."""
        self.status = BookmarkStatus.SAVED if store.contains(self.recipe_id) else BookmarkStatus.NOT_SAVED
        return self.status

    def toggle(self, store: BookmarkStore, recipe: Recipe) -> BookmarkStatus:
        """
        Flip the saved state by calling upsert() or remove().

        On a failed write the status is left as it was and error is set.

        Raises:
            ValueError: If recipe is not the recipe this toggle tracks
        """
        if recipe.id != self.recipe_id:
            raise ValueError(f"Toggle tracks recipe {self.recipe_id!r}, got {recipe.id!r}")

        if self.status == BookmarkStatus.UNKNOWN:
            self.resolve(store)

        if self.status == BookmarkStatus.SAVED:
            update = store.remove(self.recipe_id)
        else:
            update = store.upsert(recipe)

        if not update.ok:
            self.error = update.error
            return self.status

        self.error = None
        saved = any(saved_recipe.id == self.recipe_id for saved_recipe in update.bookmarks)
        self.status = BookmarkStatus.SAVED if saved else BookmarkStatus.NOT_SAVED
        return self.status
