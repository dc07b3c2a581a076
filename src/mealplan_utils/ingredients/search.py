"""Fuzzy ingredient search for autocomplete."""

import re
from typing import List, Sequence

from mealplan_utils.ingredients.models import MasterIngredient

EXACT_NAME_SCORE = 100
NAME_PREFIX_SCORE = 80
NAME_CONTAINS_SCORE = 60
ID_CONTAINS_SCORE = 50
ALIAS_PREFIX_SCORE = 45  # shadowed by ALIAS_CONTAINS_SCORE
ALIAS_CONTAINS_SCORE = 40
MAX_FREQUENCY_BOOST = 10


def score_ingredient(ingredient: MasterIngredient, query: str) -> int:
    """Score how well an ingredient matches a normalized (lowercase, stripped) query.

    Only the first matching tier counts. Tiers are checked in this order:
    exact name, name prefix, name substring, id substring, alias substring,
    alias prefix. An alias that starts with the query also contains it, so
    alias matches always land in the substring tier.

    Args:
        ingredient: Master ingredient to score.
        query: Lowercase, stripped search text.

    Returns:
        Tier score plus a frequency boost of up to 10, or 0 for no match.
    """
    name = ingredient.name.lower()

    if name == query:
        score = EXACT_NAME_SCORE
    elif name.startswith(query):
        score = NAME_PREFIX_SCORE
    elif query in name:
        score = NAME_CONTAINS_SCORE
    elif re.sub(r"\s+", "-", query) in ingredient.id:
        score = ID_CONTAINS_SCORE
    elif any(query in alias for alias in ingredient.aliases):
        score = ALIAS_CONTAINS_SCORE
    elif any(alias.startswith(query) for alias in ingredient.aliases):
        score = ALIAS_PREFIX_SCORE
    else:
        return 0

    # Common ingredients rank higher
    return score + min(ingredient.frequency * 2, MAX_FREQUENCY_BOOST)


def search_ingredients(
    query: str, master_list: Sequence[MasterIngredient], limit: int = 20
) -> List[MasterIngredient]:
    """Rank master ingredients against free text.

    Args:
        query: Raw search text. Case and surrounding whitespace are ignored.
        master_list: Master ingredient list, most common first.
        limit: Maximum number of results.

    Returns:
        Matching ingredients, best first. A blank query returns the first
        ``limit`` entries of ``master_list`` unfiltered.
    """
    lower_query = query.lower().strip()
    if not lower_query:
        return list(master_list[:limit])

    scored = []
    for ingredient in master_list:
        score = score_ingredient(ingredient, lower_query)
        if score > 0:
            scored.append((score, ingredient))

    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [ingredient for _, ingredient in scored[:limit]]
