"""Unit normalization for shopping list aggregation."""

from typing import Optional

# Canonical unit -> spellings seen in recipes
UNIT_MAP = {
    "tbsp": ["tbsp", "tablespoon", "tablespoons"],
    "tsp": ["tsp", "teaspoon", "teaspoons"],
    "cup": ["cup", "cups"],
    "oz": ["oz", "ounce", "ounces"],
    "lb": ["lb", "lbs", "pound", "pounds"],
    "g": ["g", "gram", "grams"],
    "medium": ["medium"],
    "large": ["large"],
    "small": ["small"],
    "cloves": ["clove", "cloves"],
    "pieces": ["piece", "pieces"],
    "stalks": ["stalk", "stalks"],
    "slices": ["slice", "slices"],
}

# Create reverse mapping for lookup
UNIT_LOOKUP = {v: k for k, vs in UNIT_MAP.items() for v in vs}


def normalize_unit(unit: Optional[str]) -> str:
    """Normalize a unit to its canonical spelling.

    Args:
        unit: Raw unit string, or None for unitless quantities.

    Returns:
        Canonical unit, the lowercased input if it is not a known unit, or an
        empty string for a missing unit.

    Examples:
        >>> normalize_unit("Tablespoons")
        "tbsp"
        >>> normalize_unit("pinch")
        "pinch"
    """
    if not unit:
        return ""
    lower = unit.lower().strip()
    return UNIT_LOOKUP.get(lower, lower)
