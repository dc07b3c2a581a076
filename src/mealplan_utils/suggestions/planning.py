"""Weekly meal plan suggestions that maximize ingredient reuse."""

import datetime
import logging
from typing import Dict, List, Optional, Sequence, Set, Union

from mealplan_utils.index import RecipeIndex
from mealplan_utils.number_utils import safe_ratio
from mealplan_utils.recipes.models import Recipe
from mealplan_utils.suggestions.models import (
    DaySuggestion,
    RecipeSuggestion,
    SuggestionPreferences,
    SuggestionReason,
    WeeklyPlanSuggestion,
)
from mealplan_utils.suggestions.pairing import MEAL_SLOT_COMPATIBILITY

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7
MEALS_PER_DAY = len(MEAL_SLOT_COMPATIBILITY)
VARIETY_SCORE = 80


def filter_candidates(
    recipes: Sequence[Recipe], preferences: Optional[SuggestionPreferences] = None
) -> List[Recipe]:
    """Apply exclusions, dietary tags and the optional time limit to a catalog.

    A recipe passes the dietary filter when it carries at least one of the
    requested tags.
    """
    if preferences is None:
        return list(recipes)

    excluded = set(preferences.exclude_recipe_ids)
    tags = set(preferences.dietary_tags)
    candidates = []
    for recipe in recipes:
        if recipe.id in excluded:
            continue
        if tags and not tags.intersection(recipe.dietary_tags):
            continue
        if (
            preferences.max_cook_time_minutes is not None
            and recipe.total_time_minutes > preferences.max_cook_time_minutes
        ):
            continue
        candidates.append(recipe)
    return candidates


def versatility_scores(index: RecipeIndex, candidates: Sequence[Recipe]) -> Dict[str, float]:
    """Sum of each candidate's overlap scores with the other candidates."""
    candidate_ids = {recipe.id for recipe in candidates}
    return {
        recipe.id: sum(
            o.overlap_score
            for o in index.get_overlaps(recipe.id)
            if o.recipe_b in candidate_ids
        )
        for recipe in candidates
    }


def suggest_efficient_weekly_plan(
    index: RecipeIndex,
    meal_count: int = 7,
    preferences: Optional[SuggestionPreferences] = None,
) -> WeeklyPlanSuggestion:
    """Greedily pick recipes that share as many ingredients as possible.

    The plan starts from the most versatile candidate (highest summed overlap
    with the other candidates). Each further pick is the remaining candidate
    adding the fewest ingredients not yet in the plan, with ties going to the
    candidate sharing the most ingredients with the plan, then to catalog
    order. This approximates the smallest shopping list; it is not optimal.

    Args:
        index: Recipe index to plan from.
        meal_count: Number of recipes to pick.
        preferences: Optional candidate filters.

    Returns:
        The picked recipes in selection order with shopping statistics. The
        efficiency score is ingredient usages per unique ingredient, or 0.0
        for a plan without identified ingredients.
    """
    candidates = filter_candidates(index.recipes, preferences)
    selected: List[Recipe] = []
    used_ingredients: Set[str] = set()

    if meal_count > 0 and candidates:
        scores = versatility_scores(index, candidates)
        first = max(candidates, key=lambda r: scores[r.id])
        selected.append(first)
        used_ingredients.update(first.ingredient_ids)
        candidates = [r for r in candidates if r is not first]

    while len(selected) < meal_count and candidates:
        best = None
        best_new = best_shared = 0
        for recipe in candidates:
            ids = recipe.ingredient_ids
            new_count = sum(1 for i in ids if i not in used_ingredients)
            shared_count = len(ids) - new_count
            if (
                best is None
                or new_count < best_new
                or (new_count == best_new and shared_count > best_shared)
            ):
                best, best_new, best_shared = recipe, new_count, shared_count

        selected.append(best)
        used_ingredients.update(best.ingredient_ids)
        candidates = [r for r in candidates if r is not best]

    total_usages = sum(len(recipe.ingredient_ids) for recipe in selected)
    logger.debug(
        f"Planned {len(selected)} recipes using {len(used_ingredients)} unique ingredients"
    )

    return WeeklyPlanSuggestion(
        recipes=selected,
        total_unique_ingredients=len(used_ingredients),
        total_ingredient_usages=total_usages,
        efficiency_score=safe_ratio(total_usages, len(used_ingredients)),
        estimated_shopping_items=len(used_ingredients),
    )


def _variety_suggestion(recipe: Recipe) -> RecipeSuggestion:
    return RecipeSuggestion(
        recipe=recipe,
        score=VARIETY_SCORE,
        reasons=[SuggestionReason("variety", "Suggested for variety", 0.8)],
        primary_reason="variety",
    )


def generate_week_plan(
    index: RecipeIndex,
    start_date: Union[str, datetime.date],
    preferences: Optional[SuggestionPreferences] = None,
) -> List[DaySuggestion]:
    """Lay an efficient 21-recipe plan out over seven days.

    Planned recipes are bucketed by the slots they fit ("any" fits every
    slot) and assigned to the days cyclically. A slot whose bucket is empty
    stays empty on every day.

    Args:
        index: Recipe index to plan from.
        start_date: First day, as a date or an ISO "YYYY-MM-DD" string.
        preferences: Optional candidate filters.

    Returns:
        Seven day suggestions starting at ``start_date``.
    """
    if isinstance(start_date, str):
        start_date = datetime.date.fromisoformat(start_date)
    elif isinstance(start_date, datetime.datetime):
        start_date = start_date.date()

    plan = suggest_efficient_weekly_plan(
        index, DAYS_PER_WEEK * MEALS_PER_DAY, preferences
    )
    buckets = {
        slot: [r for r in plan.recipes if r.meal_type in meal_types]
        for slot, meal_types in MEAL_SLOT_COMPATIBILITY.items()
    }
    for slot, bucket in buckets.items():
        if plan.recipes and not bucket:
            logger.warning(f"No planned recipe fits {slot}, leaving it empty")

    days = []
    for i in range(DAYS_PER_WEEK):
        day = DaySuggestion(date=(start_date + datetime.timedelta(days=i)).isoformat())
        for slot, bucket in buckets.items():
            if bucket:
                setattr(day, slot, _variety_suggestion(bucket[i % len(bucket)]))
        days.append(day)
    return days
