"""Shopping list aggregation across planned recipes."""

import dataclasses
import math
from typing import Dict, Iterable, List, Optional, Tuple

from mealplan_utils.recipes.models import Recipe, RecipeIngredient
from mealplan_utils.shopping.units import normalize_unit

CATEGORY_ORDER = [
    "produce",
    "protein",
    "seafood",
    "dairy",
    "grains",
    "pantry",
    "oils-vinegars",
    "herbs-spices",
    "nuts-seeds",
    "beverages",
    "other",
]

CATEGORY_LABELS = {
    "produce": "Produce",
    "protein": "Meat & Protein",
    "seafood": "Seafood",
    "dairy": "Dairy & Eggs",
    "grains": "Grains & Bread",
    "pantry": "Pantry Staples",
    "oils-vinegars": "Oils & Vinegars",
    "herbs-spices": "Herbs & Spices",
    "nuts-seeds": "Nuts & Seeds",
    "beverages": "Beverages",
    "other": "Other",
}

# Decimal parts shown as unicode fractions
FRACTIONS = {0.25: "¼", 0.33: "⅓", 0.5: "½", 0.67: "⅔", 0.75: "¾"}


@dataclasses.dataclass
class AggregatedIngredient:
    ingredient_id: Optional[str]
    name: str
    category: str
    total_quantity: Optional[float]  # None means "to taste"
    unit: Optional[str]
    source_recipe_ids: List[str]


@dataclasses.dataclass
class ShoppingListSection:
    category: str
    category_label: str
    items: List[AggregatedIngredient]


def aggregate_ingredients(
    entries: Iterable[Tuple[RecipeIngredient, float, str]],
) -> List[AggregatedIngredient]:
    """Combine ingredient lines that share a name and unit.

    Args:
        entries: ``(ingredient, servings, recipe_id)`` tuples. Quantities are
            multiplied by ``servings`` before being summed.

    Returns:
        One row per lowercase name and normalized unit, in first-seen order.
        A row whose first line has no quantity stays without one.
    """
    aggregated: Dict[Tuple[str, str], AggregatedIngredient] = {}

    for ingredient, servings, recipe_id in entries:
        unit = normalize_unit(ingredient.unit)
        key = (ingredient.name.lower(), unit)
        quantity = None if ingredient.quantity is None else ingredient.quantity * servings

        existing = aggregated.get(key)
        if existing is None:
            aggregated[key] = AggregatedIngredient(
                ingredient_id=ingredient.ingredient_id,
                name=ingredient.name,
                category=ingredient.category,
                total_quantity=quantity,
                unit=unit or None,
                source_recipe_ids=[recipe_id],
            )
            continue

        if quantity is not None and existing.total_quantity is not None:
            existing.total_quantity += quantity
        if recipe_id not in existing.source_recipe_ids:
            existing.source_recipe_ids.append(recipe_id)

    return list(aggregated.values())


def aggregate_plan_ingredients(
    recipes: Iterable[Recipe], servings: float = 1
) -> List[AggregatedIngredient]:
    """Aggregate every ingredient line of a set of planned recipes."""
    return aggregate_ingredients(
        (ingredient, servings, recipe.id)
        for recipe in recipes
        for ingredient in recipe.ingredients
    )


def group_by_category(items: Iterable[AggregatedIngredient]) -> List[ShoppingListSection]:
    """Group shopping rows by category in store-walk order, skipping empty groups.

    Unknown categories are filed under "other".
    """
    grouped: Dict[str, List[AggregatedIngredient]] = {c: [] for c in CATEGORY_ORDER}
    for item in items:
        category = item.category if item.category in grouped else "other"
        grouped[category].append(item)

    return [
        ShoppingListSection(category, CATEGORY_LABELS[category], grouped[category])
        for category in CATEGORY_ORDER
        if grouped[category]
    ]


def format_quantity(quantity: Optional[float], unit: Optional[str] = None) -> str:
    """Format a quantity for display.

    Examples:
        >>> format_quantity(None, "tsp")
        "to taste"
        >>> format_quantity(1.5, "cup")
        "1 ½ cup"
        >>> format_quantity(0.2, "kg")
        "0.2 kg"
    """
    if quantity is None:
        return "to taste"

    whole = math.floor(quantity)
    if quantity == whole:
        text = str(int(quantity))
    else:
        fraction = FRACTIONS.get(round((quantity - whole) * 100) / 100)
        if fraction and whole == 0:
            text = fraction
        elif fraction:
            text = f"{whole} {fraction}"
        else:
            text = f"{quantity:.1f}".rstrip("0").rstrip(".")

    return f"{text} {unit}" if unit else text
