"""Shopping list utilities."""

from .aggregation import (
    CATEGORY_LABELS,
    CATEGORY_ORDER,
    AggregatedIngredient,
    ShoppingListSection,
    aggregate_ingredients,
    aggregate_plan_ingredients,
    format_quantity,
    group_by_category,
)
from .units import normalize_unit

__all__ = [
    "CATEGORY_LABELS",
    "CATEGORY_ORDER",
    "AggregatedIngredient",
    "ShoppingListSection",
    "aggregate_ingredients",
    "aggregate_plan_ingredients",
    "format_quantity",
    "group_by_category",
    "normalize_unit",
]
