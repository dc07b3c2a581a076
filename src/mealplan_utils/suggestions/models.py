import dataclasses
from typing import List, Optional

from mealplan_utils.recipes.models import Recipe

REASON_TYPES = ("ingredient-overlap", "cuisine-match", "time-efficient", "variety")


@dataclasses.dataclass
class SharedIngredient:
    ingredient_id: str
    name: str


@dataclasses.dataclass
class RecipePairing:
    recipe: Recipe
    overlap_score: float
    shared_ingredients: List[SharedIngredient]
    shopping_efficiency: float  # share of the recipe's ingredients already needed (0-1)
    new_ingredients_needed: int


@dataclasses.dataclass
class SuggestionReason:
    type: str
    description: str
    score: float  # contribution to the overall score, 0-1


@dataclasses.dataclass
class RecipeSuggestion:
    recipe: Recipe
    score: int  # 0-100
    reasons: List[SuggestionReason]
    primary_reason: str


@dataclasses.dataclass
class SuggestionPreferences:
    """Filters applied to the catalog before planning."""

    dietary_tags: List[str] = dataclasses.field(default_factory=list)
    exclude_recipe_ids: List[str] = dataclasses.field(default_factory=list)
    max_cook_time_minutes: Optional[int] = None


@dataclasses.dataclass
class WeeklyPlanSuggestion:
    recipes: List[Recipe]
    total_unique_ingredients: int
    total_ingredient_usages: int
    efficiency_score: float  # usages per unique ingredient; higher means more reuse
    estimated_shopping_items: int


@dataclasses.dataclass
class DaySuggestion:
    date: str  # ISO date
    breakfast: Optional[RecipeSuggestion] = None
    lunch: Optional[RecipeSuggestion] = None
    dinner: Optional[RecipeSuggestion] = None


@dataclasses.dataclass
class PlannedMeal:
    """A meal already placed on the calendar."""

    date: str
    meal_type: str
    recipe: Recipe
