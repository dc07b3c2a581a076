"""Ingredient indexing, aliases, categories and fuzzy search."""

from .aliases import ALIAS_MAP, generate_aliases, plural_variant
from .categories import (
    CATEGORY_KEYWORDS,
    infer_ingredient_categories,
    infer_ingredient_category,
)
from .indexing import (
    build_master_ingredient_list,
    build_overlap_matrix,
    build_recipe_ingredient_matrix,
    calculate_overlap,
)
from .models import IngredientOverlap, IngredientSuggestion, MasterIngredient
from .search import score_ingredient, search_ingredients

__all__ = [
    "ALIAS_MAP",
    "generate_aliases",
    "plural_variant",
    "CATEGORY_KEYWORDS",
    "infer_ingredient_category",
    "infer_ingredient_categories",
    "build_master_ingredient_list",
    "build_overlap_matrix",
    "build_recipe_ingredient_matrix",
    "calculate_overlap",
    "IngredientOverlap",
    "IngredientSuggestion",
    "MasterIngredient",
    "score_ingredient",
    "search_ingredients",
]
