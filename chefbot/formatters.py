"""
Text formatting helpers for recipe display and narration.

The details page can read the ingredient list and the instructions aloud.
These helpers build the text handed to the speech engine and the short
strings shown next to it; playback itself lives in the UI.
"""

import re

from chefbot.models import Recipe

INGREDIENTS_PREFIX = "Ingredients: "
TAG_SEPARATOR = " · "

_WHITESPACE_RE = re.compile(r"\s+")


def ingredients_narration(recipe: Recipe) -> str:
    """
    Build the spoken ingredient list.

    Examples:
        "Ingredients: soy sauce - 3/4 cup, water - 1/2 cup"
    """
    lines = recipe.ingredient_lines()
    if not lines:
        return ""
    return INGREDIENTS_PREFIX + ", ".join(lines)


def instructions_narration(recipe: Recipe) -> str:
    """Instructions with line breaks and repeated spaces collapsed; '' when absent."""
    if not recipe.instructions:
        return ""
    return _WHITESPACE_RE.sub(" ", recipe.instructions).strip()


def format_tags(recipe: Recipe) -> str:
    return TAG_SEPARATOR.join(recipe.tag_set())


def format_subtitle(recipe: Recipe) -> str:
    """Category and area, e.g. 'Chicken · Japanese'."""
    parts = [part for part in (recipe.category, recipe.area) if part]
    return TAG_SEPARATOR.join(parts)
