"""Catalog-wide ingredient index: master ingredient list and recipe overlaps.

Both structures are pure functions of the recipe catalog. They are meant to be
built once and cached, see :class:`mealplan_utils.index.RecipeIndex`.
"""

import logging
from typing import Dict, List, Sequence

import numpy as np

from mealplan_utils.ingredients.aliases import generate_aliases
from mealplan_utils.ingredients.models import IngredientOverlap, MasterIngredient
from mealplan_utils.recipes.models import Recipe

logger = logging.getLogger(__name__)


def build_master_ingredient_list(recipes: Sequence[Recipe]) -> List[MasterIngredient]:
    """Build the deduplicated master ingredient list for a catalog.

    Ingredient lines without an ``ingredient_id`` are skipped: they cannot be
    matched or suggested. The first line seen for an id supplies the display
    name, category and aliases.

    Args:
        recipes: The recipe catalog, in catalog order.

    Returns:
        Master ingredients sorted by frequency, most common first. Ingredients
        with equal frequency keep the order in which they were first seen.
    """
    ingredient_map: Dict[str, MasterIngredient] = {}

    for recipe in recipes:
        for ing in recipe.ingredients:
            if not ing.ingredient_id:
                continue

            existing = ingredient_map.get(ing.ingredient_id)
            if existing is None:
                ingredient_map[ing.ingredient_id] = MasterIngredient(
                    id=ing.ingredient_id,
                    name=ing.name,
                    category=ing.category,
                    aliases=generate_aliases(ing.name, ing.ingredient_id),
                    recipe_ids=[recipe.id],
                    frequency=1,
                )
            elif recipe.id not in existing.recipe_ids:
                existing.recipe_ids.append(recipe.id)
                existing.frequency += 1

    # sorted() is stable, so encounter order breaks frequency ties
    return sorted(ingredient_map.values(), key=lambda ing: ing.frequency, reverse=True)


def calculate_overlap(recipe_a: Recipe, recipe_b: Recipe) -> IngredientOverlap:
    """Calculate the Jaccard ingredient overlap between two recipes.

    Args:
        recipe_a: Source recipe; shared ingredients are listed in its order.
        recipe_b: Recipe to compare against.

    Returns:
        The overlap. The score is 0 when neither recipe has identified
        ingredients.
    """
    ids_a = recipe_a.ingredient_ids
    ids_b = set(recipe_b.ingredient_ids)

    shared = [ing_id for ing_id in ids_a if ing_id in ids_b]
    total_unique = len(ids_b.union(ids_a))

    return IngredientOverlap(
        recipe_a=recipe_a.id,
        recipe_b=recipe_b.id,
        shared_ingredients=shared,
        overlap_score=len(shared) / total_unique if total_unique > 0 else 0.0,
        shared_count=len(shared),
        total_unique_ingredients=total_unique,
    )


def build_recipe_ingredient_matrix(recipes: Sequence[Recipe]) -> np.ndarray:
    """Build a boolean recipe-by-ingredient incidence matrix.

    Columns follow the order in which ingredient ids are first seen in the
    catalog.

    Returns:
        Array of shape (n_recipes, n_ingredients).
    """
    columns: Dict[str, int] = {}
    for recipe in recipes:
        for ing_id in recipe.ingredient_ids:
            columns.setdefault(ing_id, len(columns))

    matrix = np.zeros((len(recipes), len(columns)), dtype=bool)
    for row, recipe in enumerate(recipes):
        for ing_id in recipe.ingredient_ids:
            matrix[row, columns[ing_id]] = True
    return matrix


def build_overlap_matrix(recipes: Sequence[Recipe]) -> Dict[str, List[IngredientOverlap]]:
    """Build the pairwise overlap index for every pair of distinct recipes.

    Intersection and union sizes for all pairs come from one product of the
    incidence matrix with its transpose. Shared ingredient lists are only
    materialized for pairs that share at least one ingredient.

    This is quadratic in the catalog size and should be computed once.

    Args:
        recipes: The recipe catalog, in catalog order.

    Returns:
        Dictionary mapping each recipe id to its overlaps with every other
        recipe, sorted by overlap score descending (catalog order breaks ties).
        A recipe never appears in its own list. When ids repeat, the first
        recipe with the id owns its entry.
    """
    matrix = build_recipe_ingredient_matrix(recipes).astype(np.int64)
    intersections = matrix @ matrix.T
    sizes = matrix.sum(axis=1)

    ingredient_ids = [recipe.ingredient_ids for recipe in recipes]
    ingredient_sets = [set(ids) for ids in ingredient_ids]

    overlap_matrix: Dict[str, List[IngredientOverlap]] = {}
    for i, recipe_a in enumerate(recipes):
        if recipe_a.id in overlap_matrix:
            # Duplicate id: the first recipe keeps the entry
            continue
        overlaps = []
        for j, recipe_b in enumerate(recipes):
            if i == j:
                continue

            shared_count = int(intersections[i, j])
            total_unique = int(sizes[i] + sizes[j]) - shared_count
            if shared_count:
                shared = [x for x in ingredient_ids[i] if x in ingredient_sets[j]]
            else:
                shared = []

            overlaps.append(
                IngredientOverlap(
                    recipe_a=recipe_a.id,
                    recipe_b=recipe_b.id,
                    shared_ingredients=shared,
                    overlap_score=shared_count / total_unique if total_unique > 0 else 0.0,
                    shared_count=shared_count,
                    total_unique_ingredients=total_unique,
                )
            )

        overlaps.sort(key=lambda o: o.overlap_score, reverse=True)
        overlap_matrix[recipe_a.id] = overlaps

    logger.debug(
        f"Built overlap matrix for {len(recipes)} recipes "
        f"({matrix.shape[1]} ingredient columns)"
    )
    return overlap_matrix
