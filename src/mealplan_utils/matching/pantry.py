"""Pantry finder: match recipes against the ingredients a user has."""

import logging
from typing import Dict, Iterable, List, Optional

from mealplan_utils.index import RecipeIndex
from mealplan_utils.ingredients.models import IngredientSuggestion, MasterIngredient
from mealplan_utils.matching.models import (
    SORT_DIRECTIONS,
    SORT_FIELDS,
    IngredientMatchResult,
    PantryFinderPreferences,
    RecipeMatch,
)
from mealplan_utils.number_utils import round_half_up
from mealplan_utils.recipes.models import Recipe

logger = logging.getLogger(__name__)

# Common staples most households have on hand
PANTRY_STAPLES = frozenset(
    {
        "olive-oil",
        "salt",
        "black-pepper",
        "garlic",
        "onion",
        "lemon",
        "dried-oregano",
        "cumin",
        "paprika",
    }
)

# Recipes missing more than this many ingredients do not drive suggestions
MAX_MISSING_FOR_SUGGESTION = 3
MIN_PERCENTAGE_FOR_SUGGESTION = 50

_SORT_KEYS = {
    "match_percentage": lambda m: m.match_percentage,
    "missing_count": lambda m: m.missing_count,
    "cook_time": lambda m: m.recipe.total_time_minutes,
    "name": lambda m: m.recipe.name.lower(),
}


def raw_match_percentage(match: RecipeMatch) -> float:
    """Unrounded share of identified ingredients available, 0-100."""
    total = len(match.matched_ingredients) + match.missing_count
    return 100 * len(match.matched_ingredients) / total if total else 0.0


def match_recipe(recipe: Recipe, available_ids: Iterable[str]) -> RecipeMatch:
    """Compare one recipe's identified ingredients with the available ones.

    A recipe without identified ingredients matches 0%.
    """
    available = set(available_ids)
    recipe_ids = recipe.ingredient_ids
    matched = [ing_id for ing_id in recipe_ids if ing_id in available]
    missing = [ing_id for ing_id in recipe_ids if ing_id not in available]

    percentage = round_half_up(100 * len(matched) / len(recipe_ids)) if recipe_ids else 0

    return RecipeMatch(
        recipe=recipe,
        matched_ingredients=matched,
        missing_ingredients=missing,
        match_percentage=percentage,
        missing_count=len(missing),
    )


def find_matching_recipes(
    index: RecipeIndex,
    available_ids: Iterable[str],
    minimum_match_percentage: int = 0,
    sort_by: str = "match_percentage",
    sort_direction: str = "desc",
    preferences: Optional[PantryFinderPreferences] = None,
) -> IngredientMatchResult:
    """Find recipes that can be made (fully or partly) from available ingredients.

    Args:
        index: Recipe index to search.
        available_ids: Ingredient ids the user has.
        minimum_match_percentage: Recipes matching less than this are left out.
            The unrounded percentage is compared, so 100 keeps only recipes
            with nothing missing.
        sort_by: One of "match_percentage", "missing_count", "cook_time" or "name".
        sort_direction: "asc" or "desc".
        preferences: Overrides the three options above when given.

    Returns:
        The matches plus aggregate counts. Perfect, good and partial counts
        are computed over the returned (filtered) matches; ``total_recipes``
        is the catalog size.

    Raises:
        ValueError: If ``sort_by`` or ``sort_direction`` is not recognized.
    """
    if preferences is not None:
        minimum_match_percentage = preferences.minimum_match_percentage
        sort_by = preferences.sort_by
        sort_direction = preferences.sort_direction

    if sort_by not in SORT_FIELDS:
        raise ValueError(f"Invalid sort_by {sort_by!r}. Must be one of: {SORT_FIELDS}")
    if sort_direction not in SORT_DIRECTIONS:
        raise ValueError(
            f"Invalid sort_direction {sort_direction!r}. Must be one of: {SORT_DIRECTIONS}"
        )

    available = set(available_ids)
    matches = []
    for recipe in index.recipes:
        match = match_recipe(recipe, available)
        if raw_match_percentage(match) >= minimum_match_percentage:
            matches.append(match)

    # Stable sort: catalog order breaks ties in both directions
    matches.sort(key=_SORT_KEYS[sort_by], reverse=sort_direction == "desc")

    return IngredientMatchResult(
        matches=matches,
        total_recipes=len(index.recipes),
        perfect_matches=sum(1 for m in matches if m.match_percentage == 100),
        good_matches=sum(1 for m in matches if m.match_percentage >= 75),
        partial_matches=sum(1 for m in matches if 50 <= m.match_percentage < 75),
    )


def suggest_next_ingredients(
    index: RecipeIndex, current_ids: Iterable[str], limit: int = 5
) -> List[IngredientSuggestion]:
    """Suggest which ingredients to buy next to unlock the most recipes.

    Only recipes matched at 50% or more and missing one to three ingredients
    are considered. Every missing ingredient of such a recipe gets its improve
    count credited; when the recipe misses exactly one, that ingredient also
    gets its unlock count credited.

    Args:
        index: Recipe index to search.
        current_ids: Ingredient ids the user already has.
        limit: Maximum number of suggestions.

    Returns:
        Suggestions ranked by unlock count, then improve count, both
        descending. Empty when no recipe is close to completion.
    """
    current = set(current_ids)
    result = find_matching_recipes(
        index, current, minimum_match_percentage=MIN_PERCENTAGE_FOR_SUGGESTION
    )

    impact: Dict[str, List[int]] = {}
    for match in result.matches:
        if match.match_percentage == 100 or match.missing_count > MAX_MISSING_FOR_SUGGESTION:
            continue

        for missing_id in match.missing_ingredients:
            counts = impact.setdefault(missing_id, [0, 0])
            if match.missing_count == 1:
                counts[0] += 1
            counts[1] += 1

    suggestions = []
    for ingredient in index.master_ingredients:
        if ingredient.id in current or ingredient.id not in impact:
            continue
        unlock_count, improve_count = impact[ingredient.id]
        suggestions.append(
            IngredientSuggestion(
                ingredient=ingredient,
                unlock_count=unlock_count,
                improve_count=improve_count,
            )
        )

    suggestions.sort(key=lambda s: (s.unlock_count, s.improve_count), reverse=True)
    logger.debug(
        f"{len(suggestions)} candidate ingredients from {len(result.matches)} near matches"
    )
    return suggestions[:limit]


def can_make_recipe(
    index: RecipeIndex, recipe_id: str, available_ids: Iterable[str]
) -> dict:
    """Check whether a recipe can be made with the available ingredients.

    Returns:
        Dictionary with ``can_make``, ``match_percentage`` and ``missing``.
        Unknown recipes report ``can_make=False`` and nothing missing.
    """
    recipe = index.get_recipe(recipe_id)
    if recipe is None:
        return {"can_make": False, "match_percentage": 0, "missing": []}

    match = match_recipe(recipe, available_ids)
    return {
        "can_make": match.missing_count == 0,
        "match_percentage": match.match_percentage,
        "missing": match.missing_ingredients,
    }


def get_easy_recipes(
    index: RecipeIndex,
    max_missing_ingredients: int = 3,
    staples: Iterable[str] = PANTRY_STAPLES,
) -> List[RecipeMatch]:
    """Recipes that need at most a few ingredients beyond common staples."""
    result = find_matching_recipes(
        index, staples, sort_by="missing_count", sort_direction="asc"
    )
    return [m for m in result.matches if m.missing_count <= max_missing_ingredients]


def get_most_common_ingredients(index: RecipeIndex, limit: int = 8) -> List[MasterIngredient]:
    return index.master_ingredients[:limit]
