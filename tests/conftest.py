"""
Shared fixtures for chefbot tests.

Provides sample TheMealDB payloads so individual test modules don't have to
rebuild the flat 20-slot meal shape by hand.
"""

from typing import Any, Dict, List, Optional, Tuple

import pytest

from chefbot.models import Recipe


def make_meal(
    meal_id: str = "52772",
    name: str = "Teriyaki Chicken Casserole",
    ingredients: Optional[List[Tuple[str, str]]] = None,
    **extra: Any,
) -> Dict[str, Any]:
    """Build a flat TheMealDB meal dict with all 20 ingredient/measure slots."""
    if ingredients is None:
        ingredients = [("soy sauce", "3/4 cup"), ("water", "1/2 cup"), ("brown sugar", "1/4 cup")]
    meal: Dict[str, Any] = {
        "idMeal": meal_id,
        "strMeal": name,
        "strMealThumb": f"https://www.themealdb.com/images/media/meals/{meal_id}.jpg",
        "strInstructions": "Preheat oven to 350 F.\r\nCombine soy sauce and water.",
        "strCategory": "Chicken",
        "strArea": "Japanese",
        "strTags": "Meat,Casserole",
        "strYoutube": None,
        "strSource": None,
    }
    for slot in range(1, 21):
        if slot <= len(ingredients):
            meal[f"strIngredient{slot}"], meal[f"strMeasure{slot}"] = ingredients[slot - 1]
        else:
            meal[f"strIngredient{slot}"] = ""
            meal[f"strMeasure{slot}"] = ""
    meal.update(extra)
    return meal


@pytest.fixture
def teriyaki_meal() -> Dict[str, Any]:
    return make_meal()


@pytest.fixture
def teriyaki() -> Recipe:
    return Recipe.from_api(make_meal())
