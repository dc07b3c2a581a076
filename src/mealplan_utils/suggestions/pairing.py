"""Recipe pairing and similarity suggestions based on shared ingredients."""

from typing import List, Sequence

from mealplan_utils.index import RecipeIndex
from mealplan_utils.number_utils import round_half_up, safe_ratio
from mealplan_utils.suggestions.models import (
    PlannedMeal,
    RecipePairing,
    RecipeSuggestion,
    SharedIngredient,
    SuggestionReason,
)

# Similarity reasons below this overlap score are not worth mentioning
OVERLAP_REASON_THRESHOLD = 0.3
CUISINE_MATCH_WEIGHT = 0.3
TIME_EFFICIENT_WEIGHT = 0.2

# Meal types that may fill each calendar slot
MEAL_SLOT_COMPATIBILITY = {
    "breakfast": ("breakfast", "any"),
    "lunch": ("lunch", "any"),
    "dinner": ("dinner", "any"),
}

# Ranked pairing suggestions leave lunch unrestricted
PAIRING_SLOT_FILTERS = {
    "breakfast": ("breakfast", "any"),
    "lunch": None,
    "dinner": ("dinner", "any"),
}

POPULAR_SCORE = 70


def find_pairing_recipes(
    index: RecipeIndex, recipe_id: str, limit: int = 5
) -> List[RecipePairing]:
    """Find recipes that pair well with a recipe for efficient shopping.

    Args:
        index: Recipe index to search.
        recipe_id: Id of the base recipe.
        limit: Maximum number of pairings.

    Returns:
        The ``limit`` recipes with the highest ingredient overlap, best first,
        or an empty list for an unknown recipe id. Shopping efficiency is the
        share of the paired recipe's ingredients already needed by the base
        recipe (0.0 when the paired recipe has no identified ingredients).
    """
    base_recipe = index.get_recipe(recipe_id)
    if base_recipe is None:
        return []

    base_ingredients = set(base_recipe.ingredient_ids)
    pairings = []
    for overlap in index.get_overlaps(recipe_id)[:limit]:
        paired = index.get_recipe(overlap.recipe_b)
        paired_ingredients = paired.ingredient_ids
        new_ingredients = [i for i in paired_ingredients if i not in base_ingredients]

        shared = []
        for ing_id in overlap.shared_ingredients:
            ing = paired.find_ingredient(ing_id)
            shared.append(SharedIngredient(ing_id, ing.name if ing else ing_id))

        pairings.append(
            RecipePairing(
                recipe=paired,
                overlap_score=overlap.overlap_score,
                shared_ingredients=shared,
                shopping_efficiency=1 - len(new_ingredients) / len(paired_ingredients)
                if paired_ingredients
                else 0.0,
                new_ingredients_needed=len(new_ingredients),
            )
        )
    return pairings


def find_similar_recipes(
    index: RecipeIndex, recipe_id: str, limit: int = 6
) -> List[RecipeSuggestion]:
    """Find recipes similar to a recipe, for a "you might also like" list.

    Each candidate collects reasons in a fixed order: ingredient overlap (when
    the overlap score is above 0.3), same cuisine, and no longer total time
    than the base recipe. The score is the mean reason weight as a
    percentage, capped at 100, and the primary reason is the first one.

    Returns:
        Suggestions for the ``limit`` most overlapping recipes, or an empty
        list for an unknown recipe id.
    """
    base_recipe = index.get_recipe(recipe_id)
    if base_recipe is None:
        return []

    suggestions = []
    for overlap in index.get_overlaps(recipe_id)[:limit]:
        recipe = index.get_recipe(overlap.recipe_b)
        reasons = []

        if overlap.overlap_score > OVERLAP_REASON_THRESHOLD:
            reasons.append(
                SuggestionReason(
                    "ingredient-overlap",
                    f"Shares {overlap.shared_count} ingredients",
                    overlap.overlap_score,
                )
            )
        if recipe.cuisine == base_recipe.cuisine:
            reasons.append(
                SuggestionReason(
                    "cuisine-match", f"Same {recipe.cuisine} cuisine", CUISINE_MATCH_WEIGHT
                )
            )
        if recipe.total_time_minutes <= base_recipe.total_time_minutes:
            reasons.append(
                SuggestionReason(
                    "time-efficient",
                    f"Ready in {recipe.total_time_minutes} min",
                    TIME_EFFICIENT_WEIGHT,
                )
            )

        total = sum(reason.score * 100 for reason in reasons)
        score = min(100, round_half_up(total / max(len(reasons), 1)))

        suggestions.append(
            RecipeSuggestion(
                recipe=recipe,
                score=score,
                reasons=reasons,
                primary_reason=reasons[0].type if reasons else "ingredient-overlap",
            )
        )
    return suggestions


def get_popular_recipes_for_meal_type(
    index: RecipeIndex, meal_type: str, limit: int = 3
) -> List[RecipeSuggestion]:
    """First recipes in the catalog that fit a meal slot."""
    valid = MEAL_SLOT_COMPATIBILITY[meal_type]
    recipes = [r for r in index.recipes if r.meal_type in valid][:limit]
    return [
        RecipeSuggestion(
            recipe=recipe,
            score=POPULAR_SCORE,
            reasons=[SuggestionReason("variety", "Popular choice for this meal", 0.7)],
            primary_reason="variety",
        )
        for recipe in recipes
    ]


def get_pairing_suggestions(
    index: RecipeIndex,
    existing_meals: Sequence[PlannedMeal],
    target_meal_type: str,
    limit: int = 3,
) -> List[RecipeSuggestion]:
    """Suggest recipes for a calendar slot that reuse already planned ingredients.

    Args:
        index: Recipe index to search.
        existing_meals: Meals already on the calendar.
        target_meal_type: Slot to fill: "breakfast", "lunch" or "dinner".
        limit: Maximum number of suggestions.

    Returns:
        Candidates fitting the slot (any meal type for lunch) and not yet
        planned, ranked by ingredients shared with the planned meals
        (descending), then new ingredients (ascending). With nothing planned, the first recipes fitting the slot.

    Raises:
        KeyError: If ``target_meal_type`` is not a calendar slot.
    """
    if not existing_meals:
        return get_popular_recipes_for_meal_type(index, target_meal_type, limit)

    valid = PAIRING_SLOT_FILTERS[target_meal_type]
    planned_ids = {meal.recipe.id for meal in existing_meals}
    existing_ingredients = set()
    for meal in existing_meals:
        existing_ingredients.update(meal.recipe.ingredient_ids)

    candidates = []
    for recipe in index.recipes:
        if recipe.id in planned_ids or (valid is not None and recipe.meal_type not in valid):
            continue
        ids = recipe.ingredient_ids
        shared_count = sum(1 for i in ids if i in existing_ingredients)
        candidates.append((recipe, shared_count, len(ids) - shared_count))

    candidates.sort(key=lambda c: (-c[1], c[2]))

    suggestions = []
    for recipe, shared_count, new_count in candidates[:limit]:
        share = safe_ratio(shared_count, shared_count + new_count)
        suggestions.append(
            RecipeSuggestion(
                recipe=recipe,
                score=round_half_up(share * 100),
                reasons=[
                    SuggestionReason(
                        "ingredient-overlap",
                        f"Uses {shared_count} ingredients you already have",
                        share,
                    )
                ],
                primary_reason="ingredient-overlap",
            )
        )
    return suggestions
