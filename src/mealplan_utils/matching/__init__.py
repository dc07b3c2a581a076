"""Pantry matching and next-ingredient suggestions."""

from .models import (
    SORT_DIRECTIONS,
    SORT_FIELDS,
    IngredientMatchResult,
    PantryFinderPreferences,
    RecipeMatch,
)
from .pantry import (
    PANTRY_STAPLES,
    can_make_recipe,
    find_matching_recipes,
    get_easy_recipes,
    get_most_common_ingredients,
    match_recipe,
    raw_match_percentage,
    suggest_next_ingredients,
)

__all__ = [
    "SORT_FIELDS",
    "SORT_DIRECTIONS",
    "RecipeMatch",
    "IngredientMatchResult",
    "PantryFinderPreferences",
    "PANTRY_STAPLES",
    "match_recipe",
    "raw_match_percentage",
    "find_matching_recipes",
    "suggest_next_ingredients",
    "can_make_recipe",
    "get_easy_recipes",
    "get_most_common_ingredients",
]
