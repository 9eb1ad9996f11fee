"""
Base recipe source abstract class.

This module defines the abstract base class every recipe backend must implement.
The fetch boundary (chefbot.fetch) and the Streamlit pages only talk to this
interface, so a different recipe API can be dropped in without touching them.

All sources must:
- Implement the source attribute (e.g., "mealdb")
- Provide fetch_random, search_by_name and lookup_by_id returning Recipe models
- Raise the typed errors from chefbot.errors instead of library exceptions
"""

from abc import ABC, abstractmethod
from typing import List

from chefbot.models import Recipe


class BaseRecipeSource(ABC):
    """
    Abstract base class for recipe sources.

    Attributes:
        source: String identifier for the backend (e.g., "mealdb")
    """
    source: str

    @abstractmethod
    def fetch_random(self) -> Recipe:
        """
        Fetch one recipe chosen by the remote service.

        Raises:
            NetworkError: On transport failure or non-success status
            EmptyResultError: If the response carried no usable recipe
        """
        pass

    @abstractmethod
    def search_by_name(self, query: str) -> List[Recipe]:
        """
        Search recipes by name.

        Returns:
            Matching recipes; an empty list is a valid result, not an error.

        Raises:
            NetworkError: On transport failure or non-success status
        """
        pass

    @abstractmethod
    def lookup_by_id(self, recipe_id: str) -> Recipe:
        """
        Look up exactly one recipe by its upstream id.

        Raises:
            NetworkError: On transport failure or non-success status
            NotFoundError: If the id does not exist upstream
        """
        pass
