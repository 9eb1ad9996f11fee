"""
Recipe models for the chefbot core.

This module defines the canonical Recipe schema used throughout the package.
The recipe API (TheMealDB) returns a flat JSON object per meal with twenty
discrete ingredient/measure slots; internally a Recipe keeps those as an
ordered tuple of Ingredient pairs and maps back to the flat shape on output.

# NOTE: Recipe.to_api() is also the persisted format for bookmarks, so the
    bookmark blob stays readable by anything that understands the upstream
    wire shape.

Wire field mapping:
- idMeal -> id
- strMeal -> name
- strMealThumb -> thumbnail_url
- strInstructions -> instructions
- strCategory / strArea / strTags -> category / area / tags
- strYoutube / strSource -> youtube_url / source_url
- strIngredient1..20 + strMeasure1..20 -> ingredients
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Number of ingredient/measure slots in the upstream schema
MAX_INGREDIENT_SLOTS = 20


class Ingredient(BaseModel):
    """
    A single ingredient line: name plus free-text measure (may be empty).

    Both fields are stored trimmed, the same way from_api() reads them.
    """
    name: str = Field(..., min_length=1, description="Ingredient name")
    measure: str = Field(default="", description="Free-text measure, e.g. '1 cup'")

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("ingredient name must not be blank")
        return value

    def display(self) -> str:
        """Format as 'name - measure', or just the name when there is no measure."""
        if not self.measure:
            return self.name
        return f"{self.name} - {self.measure}"


class Recipe(BaseModel):
    """
    Immutable recipe record.

    Two recipes with the same id are the same logical recipe, whatever their
    other fields say; see same_recipe(). Locally bookmarked copies are
    snapshots and are never re-synced with the API.
    """
    id: str = Field(..., description="Upstream recipe id (idMeal)")
    name: str = Field(..., description="Display title (strMeal)")
    thumbnail_url: str = Field(default="", description="Image URL, may be empty")
    instructions: Optional[str] = Field(None, description="Free-text preparation steps")
    category: Optional[str] = Field(None, description="Category, e.g. 'Chicken'")
    area: Optional[str] = Field(None, description="Cuisine area, e.g. 'Japanese'")
    tags: Optional[str] = Field(None, description="Comma-separated tags, stored verbatim")
    youtube_url: Optional[str] = Field(None, description="Video link")
    source_url: Optional[str] = Field(None, description="Original recipe page")
    ingredients: Tuple[Ingredient, ...] = Field(
        default=(),
        max_length=MAX_INGREDIENT_SLOTS,
        description="Ordered ingredient lines, at most 20",
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("id")
    @classmethod
    def _id_not_empty(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("recipe id must not be empty")
        return value

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("recipe name must not be blank")
        return value

    @classmethod
    def from_api(cls, meal: Dict[str, Any]) -> "Recipe":
        """
        Build a Recipe from one entry of the API's "meals" array.

        Only slots whose ingredient name is non-blank are kept. Measures are
        trimmed and a missing measure becomes "".

        Args:
            meal: Flat meal dictionary as returned by the recipe API

        Returns:
            Recipe instance

        Raises:
            pydantic.ValidationError: If idMeal or strMeal is missing or blank
        """
        ingredients: List[Ingredient] = []
        for slot in range(1, MAX_INGREDIENT_SLOTS + 1):
            name = meal.get(f"strIngredient{slot}")
            if name is None or not str(name).strip():
                continue
            measure = meal.get(f"strMeasure{slot}")
            ingredients.append(
                Ingredient(
                    name=str(name).strip(),
                    measure=str(measure).strip() if measure is not None else "",
                )
            )

        raw_id = meal.get("idMeal")
        return cls(
            id=str(raw_id) if raw_id is not None else "",
            name=meal.get("strMeal") or "",
            thumbnail_url=meal.get("strMealThumb") or "",
            instructions=meal.get("strInstructions"),
            category=meal.get("strCategory"),
            area=meal.get("strArea"),
            tags=meal.get("strTags"),
            youtube_url=meal.get("strYoutube"),
            source_url=meal.get("strSource"),
            ingredients=tuple(ingredients),
        )

    def to_api(self) -> Dict[str, Any]:
        """
        Convert back to the flat API shape with exactly 20 ingredient/measure pairs.

        Unused slots are written as None, matching what the API itself returns.
        """
        data: Dict[str, Any] = {
            "idMeal": self.id,
            "strMeal": self.name,
            "strMealThumb": self.thumbnail_url,
            "strInstructions": self.instructions,
            "strCategory": self.category,
            "strArea": self.area,
            "strTags": self.tags,
            "strYoutube": self.youtube_url,
            "strSource": self.source_url,
        }
        for slot in range(1, MAX_INGREDIENT_SLOTS + 1):
            if slot <= len(self.ingredients):
                ingredient = self.ingredients[slot - 1]
                data[f"strIngredient{slot}"] = ingredient.name
                data[f"strMeasure{slot}"] = ingredient.measure
            else:
                data[f"strIngredient{slot}"] = None
                data[f"strMeasure{slot}"] = None
        return data

    def tag_set(self) -> List[str]:
        """
        Split the comma-separated tags into display tags.

        Tags are trimmed, blanks dropped and duplicates removed keeping the
        first occurrence. The stored tags string is not modified.

        Examples:
            >>> Recipe(id="1", name="x", tags="Meat, Casserole,,Meat").tag_set()
            ['Meat', 'Casserole']
        """
        if not self.tags:
            return []
        seen: List[str] = []
        for part in self.tags.split(","):
            tag = part.strip()
            if tag and tag not in seen:
                seen.append(tag)
        return seen

    def ingredient_lines(self) -> List[str]:
        """Ingredient display lines in slot order, e.g. 'soy sauce - 3/4 cup'."""
        return [ingredient.display() for ingredient in self.ingredients]

    def same_recipe(self, other: "Recipe") -> bool:
        """Identity comparison: same upstream id means same recipe."""
        return self.id == other.id
