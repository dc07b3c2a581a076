"""Recipe models and catalog loading."""

from .catalog import (
    get_featured_recipes,
    get_recipe_by_id,
    get_recipe_by_slug,
    get_recipes_by_meal_type,
    ingredient_from_dict,
    load_catalog,
    load_recipes,
    recipe_from_dict,
    search_recipes,
)
from .models import Instruction, NutritionInfo, Recipe, RecipeIngredient

__all__ = [
    "Recipe",
    "RecipeIngredient",
    "Instruction",
    "NutritionInfo",
    "recipe_from_dict",
    "ingredient_from_dict",
    "load_recipes",
    "load_catalog",
    "get_recipe_by_id",
    "get_recipe_by_slug",
    "get_featured_recipes",
    "get_recipes_by_meal_type",
    "search_recipes",
]
