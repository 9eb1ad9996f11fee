"""
Result-valued fetch operations.

This module is the boundary between recipe sources and UI code. Each function
calls a BaseRecipeSource, catches the typed errors it raises and returns a
FetchResult, so no exception crosses into the caller.

Status values:
- "ok": the call succeeded; recipes holds one recipe (random/lookup) or zero
  or more (search). An empty search is "ok" with no recipes.
- "empty": a random draw came back without a recipe. Retryable.
- "not_found": a lookup by id found nothing. Not retryable; the UI offers "go back".
- "network_error": transport failure or bad status. Retryable.
"""

import logging
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from chefbot.connectors.base import BaseRecipeSource
from chefbot.errors import EmptyResultError, NetworkError, NotFoundError
from chefbot.models import Recipe

logger = logging.getLogger(__name__)

FetchStatus = Literal["ok", "empty", "not_found", "network_error"]

RETRYABLE_STATUSES = ("empty", "network_error")


class FetchResult(BaseModel):
    """Outcome of one fetch operation."""
    status: FetchStatus = Field(..., description="Outcome category")
    recipes: List[Recipe] = Field(default_factory=list, description="Recipes returned on success")
    message: Optional[str] = Field(None, description="Human-readable error message")

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def recipe(self) -> Optional[Recipe]:
        """First recipe of a successful result, or None."""
        return self.recipes[0] if self.recipes else None

    @property
    def retryable(self) -> bool:
        return self.status in RETRYABLE_STATUSES


def _failure(status: FetchStatus, error: Exception) -> FetchResult:
    return FetchResult(status=status, message=str(error))


def fetch_random(source: BaseRecipeSource) -> FetchResult:
    """
    Fetch a random recipe as a result value.

    Args:
        source: Recipe source to query

    Returns:
        FetchResult with status "ok", "empty" or "network_error"
    """
    try:
        recipe = source.fetch_random()
    except EmptyResultError as e:
        return _failure("empty", e)
    except NetworkError as e:
        return _failure("network_error", e)
    except Exception as e:
        logger.exception("Unexpected error fetching a random recipe from %s", source.source)
        return _failure("network_error", e)
    return FetchResult(status="ok", recipes=[recipe])


def search_by_name(source: BaseRecipeSource, query: str) -> FetchResult:
    """
    Search recipes by name as a result value.

    Args:
        source: Recipe source to query
        query: Name query

    Returns:
        FetchResult with status "ok" (recipes may be empty) or "network_error"
    """
    try:
        recipes = source.search_by_name(query)
    except NetworkError as e:
        return _failure("network_error", e)
    except Exception as e:
        logger.exception("Unexpected error searching %s for %r", source.source, query)
        return _failure("network_error", e)
    return FetchResult(status="ok", recipes=recipes)


def lookup_by_id(source: BaseRecipeSource, recipe_id: str) -> FetchResult:
    """
    Look up one recipe by id as a result value.

    Args:
        source: Recipe source to query
        recipe_id: Upstream recipe id

    Returns:
        FetchResult with status "ok", "not_found" or "network_error"
    """
    try:
        recipe = source.lookup_by_id(recipe_id)
    except NotFoundError as e:
        return _failure("not_found", e)
    except NetworkError as e:
        return _failure("network_error", e)
    except Exception as e:
        logger.exception("Unexpected error looking up recipe %r on %s", recipe_id, source.source)
        return _failure("network_error", e)
    return FetchResult(status="ok", recipes=[recipe])
