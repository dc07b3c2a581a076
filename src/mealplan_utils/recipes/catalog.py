"""Recipe catalog loading and lookups."""

import json
import logging
import pathlib
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from mealplan_utils.ingredients.categories import infer_ingredient_category
from mealplan_utils.recipes.models import (
    Instruction,
    NutritionInfo,
    Recipe,
    RecipeIngredient,
)

logger = logging.getLogger(__name__)

REQUIRED_RECIPE_FIELDS = ("id", "name", "ingredients")


def _snake_case(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def _normalize_keys(record: Mapping[str, Any]) -> Dict[str, Any]:
    """Accept both snake_case and camelCase keys (``ingredientId``)."""
    return {_snake_case(key): value for key, value in record.items()}


def ingredient_from_dict(record: Mapping[str, Any]) -> RecipeIngredient:
    """Build a RecipeIngredient, inferring the category when it is missing."""
    data = _normalize_keys(record)
    name = data.get("name") or data.get("text") or ""
    quantity = data.get("quantity")
    return RecipeIngredient(
        name=name,
        ingredient_id=data.get("ingredient_id") or None,
        category=data.get("category") or infer_ingredient_category(name),
        quantity=float(quantity) if quantity is not None else None,
        unit=data.get("unit"),
        preparation=data.get("preparation"),
        notes=data.get("notes"),
        id=str(data["id"]) if data.get("id") is not None else None,
    )


def recipe_from_dict(record: Mapping[str, Any]) -> Recipe:
    """Build a Recipe from a JSON-style record.

    Args:
        record: Recipe record with snake_case or camelCase keys.

    Returns:
        The parsed recipe.

    Raises:
        ValueError: If the record lacks an id, name or ingredient list.
    """
    data = _normalize_keys(record)
    missing = [field for field in REQUIRED_RECIPE_FIELDS if data.get(field) is None]
    if missing:
        raise ValueError(
            f"Recipe record {data.get('id', '<no id>')!r} is missing {', '.join(missing)}"
        )

    nutrition = data.get("nutrition")
    return Recipe(
        id=str(data["id"]),
        name=data["name"],
        ingredients=[ingredient_from_dict(ing) for ing in data["ingredients"]],
        slug=data.get("slug"),
        description=data.get("description") or "",
        meal_type=data.get("meal_type") or "any",
        cuisine=data.get("cuisine") or "",
        dietary_tags=list(data.get("dietary_tags") or []),
        difficulty=data.get("difficulty") or "easy",
        prep_time_minutes=int(data.get("prep_time_minutes") or 0),
        cook_time_minutes=int(data.get("cook_time_minutes") or 0),
        total_time_minutes=data.get("total_time_minutes"),
        servings=int(data.get("servings") or 1),
        instructions=[
            Instruction(**_normalize_keys(step)) for step in data.get("instructions") or []
        ],
        tips=data.get("tips"),
        nutrition=NutritionInfo(**_normalize_keys(nutrition)) if nutrition else None,
        image_url=data.get("image_url"),
        is_featured=bool(data.get("is_featured", False)),
    )


def load_recipes(records: Iterable[Mapping[str, Any]]) -> List[Recipe]:
    return [recipe_from_dict(record) for record in records]


def load_catalog(path: Union[str, pathlib.Path]) -> List[Recipe]:
    """Load a recipe catalog from a JSON file.

    The file holds either a list of recipe records or an object with a
    ``recipes`` list.

    Args:
        path: Path to the JSON file.

    Returns:
        Recipes in file order.

    Raises:
        ValueError: If the file layout or a recipe record is malformed.
    """
    path = pathlib.Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("recipes")
    if not isinstance(data, list):
        raise ValueError(f"{path} does not contain a list of recipes")

    recipes = load_recipes(data)
    logger.info(f"Loaded {len(recipes)} recipes from {path}")
    return recipes


def get_recipe_by_id(recipes: Iterable[Recipe], recipe_id: str) -> Optional[Recipe]:
    return next((r for r in recipes if r.id == recipe_id), None)


def get_recipe_by_slug(recipes: Iterable[Recipe], slug: str) -> Optional[Recipe]:
    return next((r for r in recipes if r.slug == slug), None)


def get_featured_recipes(recipes: Iterable[Recipe]) -> List[Recipe]:
    return [r for r in recipes if r.is_featured]


def get_recipes_by_meal_type(recipes: Iterable[Recipe], meal_type: str) -> List[Recipe]:
    return [r for r in recipes if r.meal_type == meal_type]


def search_recipes(recipes: Iterable[Recipe], query: str) -> List[Recipe]:
    """Recipes whose name, description or any ingredient name contains ``query``."""
    lower_query = query.lower()
    return [
        r
        for r in recipes
        if lower_query in r.name.lower()
        or lower_query in r.description.lower()
        or any(lower_query in ing.name.lower() for ing in r.ingredients)
    ]
