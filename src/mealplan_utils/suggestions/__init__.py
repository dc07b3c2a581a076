"""Recipe pairing, similarity and weekly plan suggestions."""

from .models import (
    DaySuggestion,
    PlannedMeal,
    RecipePairing,
    RecipeSuggestion,
    SharedIngredient,
    SuggestionPreferences,
    SuggestionReason,
    WeeklyPlanSuggestion,
)
from .pairing import (
    find_pairing_recipes,
    find_similar_recipes,
    get_pairing_suggestions,
    get_popular_recipes_for_meal_type,
)
from .planning import (
    filter_candidates,
    generate_week_plan,
    suggest_efficient_weekly_plan,
    versatility_scores,
)

__all__ = [
    "DaySuggestion",
    "PlannedMeal",
    "RecipePairing",
    "RecipeSuggestion",
    "SharedIngredient",
    "SuggestionPreferences",
    "SuggestionReason",
    "WeeklyPlanSuggestion",
    "find_pairing_recipes",
    "find_similar_recipes",
    "get_pairing_suggestions",
    "get_popular_recipes_for_meal_type",
    "filter_candidates",
    "generate_week_plan",
    "suggest_efficient_weekly_plan",
    "versatility_scores",
]
