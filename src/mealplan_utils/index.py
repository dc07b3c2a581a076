"""Memoized ingredient index over a recipe catalog."""

import collections
import logging
import threading
import time
from typing import Dict, Iterable, List, Optional

from mealplan_utils.ingredients.indexing import (
    build_master_ingredient_list,
    build_overlap_matrix,
)
from mealplan_utils.ingredients.models import IngredientOverlap, MasterIngredient
from mealplan_utils.recipes.models import Recipe

logger = logging.getLogger(__name__)


class RecipeIndex:
    """Catalog plus its derived ingredient structures, built lazily once.

    The master ingredient list and the overlap matrix are each computed on
    first access and then reused. Each build runs under its own lock, so
    concurrent first readers wait for a single build and never observe a
    partially built structure. After that the index is read-only.

    Attributes:
        recipes (list): The catalog, in catalog order.
    """

    def __init__(self, recipes: Iterable[Recipe]):
        self.recipes: List[Recipe] = list(recipes)
        self._recipes_by_id: Dict[str, Recipe] = {}
        for recipe in self.recipes:
            if recipe.id in self._recipes_by_id:
                logger.warning(f"Duplicate recipe id {recipe.id!r}, lookups return the first")
                continue
            self._recipes_by_id[recipe.id] = recipe

        self._master_ingredients: Optional[List[MasterIngredient]] = None
        self._ingredients_by_id: Optional[Dict[str, MasterIngredient]] = None
        self._overlap_matrix: Optional[Dict[str, List[IngredientOverlap]]] = None
        self._master_lock = threading.Lock()
        self._overlap_lock = threading.Lock()

    def __len__(self) -> int:
        return len(self.recipes)

    @property
    def master_ingredients(self) -> List[MasterIngredient]:
        """Master ingredient list, most common first (built on first access)."""
        return self._build_master()[0]

    def _build_master(self):
        if self._master_ingredients is None:
            with self._master_lock:
                if self._master_ingredients is None:
                    start = time.perf_counter()
                    master = build_master_ingredient_list(self.recipes)
                    self._ingredients_by_id = {ing.id: ing for ing in master}
                    self._master_ingredients = master
                    logger.info(
                        f"Indexed {len(master)} ingredients from {len(self.recipes)} "
                        f"recipes in {time.perf_counter() - start:.3f}s"
                    )
        return self._master_ingredients, self._ingredients_by_id

    @property
    def overlap_matrix(self) -> Dict[str, List[IngredientOverlap]]:
        """Per-recipe overlap lists (built on first access)."""
        if self._overlap_matrix is None:
            with self._overlap_lock:
                if self._overlap_matrix is None:
                    start = time.perf_counter()
                    self._overlap_matrix = build_overlap_matrix(self.recipes)
                    logger.info(
                        f"Computed recipe overlaps for {len(self.recipes)} recipes "
                        f"in {time.perf_counter() - start:.3f}s"
                    )
        return self._overlap_matrix

    def get_overlaps(self, recipe_id: str) -> List[IngredientOverlap]:
        """Overlaps of a recipe with every other recipe, best first.

        Returns an empty list for ids that are not in the catalog.
        """
        return self.overlap_matrix.get(recipe_id, [])

    def get_recipe(self, recipe_id: str) -> Optional[Recipe]:
        return self._recipes_by_id.get(recipe_id)

    def get_ingredient(self, ingredient_id: str) -> Optional[MasterIngredient]:
        return self._build_master()[1].get(ingredient_id)

    def get_ingredients_by_category(self, category: str) -> List[MasterIngredient]:
        return [ing for ing in self.master_ingredients if ing.category == category]

    def get_ingredient_stats(self) -> dict:
        """Summary statistics about the ingredient index.

        Returns:
            Dictionary with the number of unique ingredients and recipes, the
            ten most common ingredients and ingredient counts per category.
        """
        ingredients = self.master_ingredients
        by_category = collections.Counter(ing.category for ing in ingredients)

        return {
            "total_unique_ingredients": len(ingredients),
            "total_recipes": len(self.recipes),
            "most_common": [
                {"name": ing.name, "frequency": ing.frequency}
                for ing in ingredients[:10]
            ],
            "by_category": dict(by_category),
        }

    def clear_cache(self) -> None:
        """Drop the derived structures so they are rebuilt on next access."""
        with self._master_lock:
            self._master_ingredients = None
            self._ingredients_by_id = None
        with self._overlap_lock:
            self._overlap_matrix = None
