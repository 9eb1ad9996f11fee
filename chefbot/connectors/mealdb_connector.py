"""
TheMealDB connector using the public JSON API.

This connector issues the three fixed queries the app needs against TheMealDB
and maps the responses into Recipe models.

The connector:
- Uses requests.get against random.php, search.php?s=... and lookup.php?i=...
- Reads the {"meals": [...] | null} envelope and skips null or malformed entries
- Raises NetworkError for timeouts, connection errors, non-2xx statuses and non-JSON bodies
- Raises EmptyResultError when a random draw returns no recipe
- Raises NotFoundError when a lookup by id returns no recipe
- Treats an empty search as a valid empty list

There is no retry and no caching; retrying is a user action in the UI.
Base URL and timeout come from MEALDB_BASE_URL / MEALDB_TIMEOUT_SECONDS (see chefbot.config).
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from chefbot.config import MealDBConfig
from chefbot.errors import EmptyResultError, NetworkError, NotFoundError
from chefbot.models import Recipe

from .base import BaseRecipeSource

logger = logging.getLogger(__name__)


class MealDBConnector(BaseRecipeSource):
    """
    Connector for TheMealDB recipe API.

    Each call performs exactly one HTTP GET and waits for it to complete;
    the timeout is the only bound on how long a call can take.
    """
    source = "mealdb"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Initialize the connector.

        Args:
            base_url: API base URL (optional, reads MEALDB_BASE_URL or uses the public v1 endpoint)
            timeout: Request timeout in seconds (optional, reads MEALDB_TIMEOUT_SECONDS or defaults to 10)
        """
        self.base_url = (base_url or MealDBConfig.get_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else MealDBConfig.get_timeout()

    def _get_meals(self, endpoint: str, params: Optional[Dict[str, str]] = None) -> List[Dict[str, Any]]:
        """
        GET an endpoint and return the raw entries of its "meals" array.

        A null or missing "meals" field is returned as an empty list; null
        entries inside the array are dropped.

        Raises:
            NetworkError: On any transport failure, non-2xx status or unreadable body
        """
        url = f"{self.base_url}/{endpoint}"
        logger.debug("MealDB connector: GET %s params=%s", url, params)

        try:
            response = requests.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            logger.error("MealDB connector: request to %s timed out after %.1fs", endpoint, self.timeout)
            raise NetworkError(f"The recipe service did not respond in time ({e})") from e
        except requests.exceptions.ConnectionError as e:
            logger.error("MealDB connector: cannot connect to %s: %s", url, e)
            raise NetworkError(f"Cannot reach the recipe service: {e}") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error("MealDB connector: %s returned HTTP %s", endpoint, status)
            raise NetworkError(f"The recipe service returned HTTP {status}", status_code=status) from e
        except requests.exceptions.RequestException as e:
            logger.error("MealDB connector: request to %s failed: %s", endpoint, e)
            raise NetworkError(f"Network error: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise NetworkError(
                "Unexpected response from the recipe service: body is not JSON",
                status_code=response.status_code,
            ) from e

        if not isinstance(body, dict):
            raise NetworkError(
                "Unexpected response format from the recipe service: expected a JSON object",
                status_code=response.status_code,
            )

        meals = body.get("meals")
        if meals is None:
            return []
        if not isinstance(meals, list):
            raise NetworkError(
                "Unexpected response format from the recipe service: 'meals' is not a list",
                status_code=response.status_code,
            )
        return [meal for meal in meals if isinstance(meal, dict)]

    def _parse_meals(self, meals: List[Dict[str, Any]]) -> List[Recipe]:
        """Map raw meal dicts to Recipe models, skipping entries that fail validation."""
        recipes: List[Recipe] = []
        for meal in meals:
            try:
                recipes.append(Recipe.from_api(meal))
            except ValidationError as e:
                logger.warning(
                    "MealDB connector: skipping malformed meal idMeal=%r: %s",
                    meal.get("idMeal"),
                    e.errors()[0].get("msg") if e.errors() else e,
                )
        return recipes

    def fetch_random(self) -> Recipe:
        """
        Fetch one random recipe.

        Returns:
            The first usable recipe in the response

        Raises:
            NetworkError: On transport failure or non-success status
            EmptyResultError: If "meals" is null, empty, or holds no usable entry
        """
        recipes = self._parse_meals(self._get_meals("random.php"))
        if not recipes:
            raise EmptyResultError("The recipe service returned no recipe")
        logger.debug("MealDB connector: random recipe %s (%s)", recipes[0].id, recipes[0].name)
        return recipes[0]

    def search_by_name(self, query: str) -> List[Recipe]:
        """
        Search recipes whose name matches the query.

        Args:
            query: Free-text name query (e.g., "chicken"); sent as-is

        Returns:
            List of matching recipes, possibly empty
        """
        recipes = self._parse_meals(self._get_meals("search.php", params={"s": query}))
        logger.debug("MealDB connector: search %r returned %d recipes", query, len(recipes))
        return recipes

    def lookup_by_id(self, recipe_id: str) -> Recipe:
        """
        Look up a recipe by id.

        Args:
            recipe_id: Upstream recipe id (e.g., "52772")

        Returns:
            The matching recipe

        Raises:
            NetworkError: On transport failure or non-success status
            NotFoundError: If the id is blank or the API has no such recipe
        """
        if not recipe_id or not recipe_id.strip():
            raise NotFoundError(recipe_id)

        recipes = self._parse_meals(self._get_meals("lookup.php", params={"i": recipe_id}))
        if not recipes:
            raise NotFoundError(recipe_id)
        return recipes[0]
