"""Meal Plan Utils - Recipe similarity, pantry matching and meal plan suggestions."""

__version__ = "0.1.0"

from . import database, ingredients, matching, recipes, shopping, suggestions
from .index import RecipeIndex

__all__ = [
    "RecipeIndex",
    "database",
    "ingredients",
    "matching",
    "recipes",
    "shopping",
    "suggestions",
]
