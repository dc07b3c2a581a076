import dataclasses
from typing import List

from mealplan_utils.recipes.models import Recipe

SORT_FIELDS = ("match_percentage", "missing_count", "cook_time", "name")
SORT_DIRECTIONS = ("asc", "desc")


@dataclasses.dataclass
class RecipeMatch:
    recipe: Recipe
    matched_ingredients: List[str]
    missing_ingredients: List[str]
    match_percentage: int  # 0-100
    missing_count: int

    @property
    def recipe_id(self) -> str:
        return self.recipe.id


@dataclasses.dataclass
class IngredientMatchResult:
    matches: List[RecipeMatch]
    total_recipes: int
    perfect_matches: int  # 100%
    good_matches: int  # 75% and up
    partial_matches: int  # 50-74%


@dataclasses.dataclass
class PantryFinderPreferences:
    """Options for :func:`mealplan_utils.matching.find_matching_recipes`."""

    minimum_match_percentage: int = 0
    sort_by: str = "match_percentage"
    sort_direction: str = "desc"
