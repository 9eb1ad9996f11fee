"""
Recipe source connectors.

This package contains:
- base: BaseRecipeSource abstract interface
- mealdb_connector: TheMealDB implementation over requests
"""

from .base import BaseRecipeSource
from .mealdb_connector import MealDBConnector

__all__ = ["BaseRecipeSource", "MealDBConnector"]
