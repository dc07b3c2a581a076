#!/usr/bin/env python3
"""
Find recipes for the ingredients on hand and suggest what to buy next.
"""

import argparse
import logging
from typing import List, Set

from mealplan_utils import RecipeIndex
from mealplan_utils.ingredients import search_ingredients
from mealplan_utils.matching import (
    SORT_FIELDS,
    find_matching_recipes,
    suggest_next_ingredients,
)
from mealplan_utils.recipes import load_catalog

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def resolve_ingredients(index: RecipeIndex, names: List[str]) -> Set[str]:
    """Map free-text ingredient names to ingredient ids via fuzzy search."""
    resolved = set()
    for name in names:
        if index.get_ingredient(name):
            resolved.add(name)
            continue
        hits = search_ingredients(name, index.master_ingredients, limit=1)
        if hits:
            print(f"  '{name}' -> {hits[0].name} ({hits[0].id})")
            resolved.add(hits[0].id)
        else:
            logger.warning(f"No ingredient matches '{name}', ignoring it")
    return resolved


def main():
    """Main function to run a pantry query against a catalog."""
    parser = argparse.ArgumentParser(
        description="Match recipes against available ingredients"
    )
    parser.add_argument("--catalog", type=str, required=True, help="JSON recipe catalog")
    parser.add_argument(
        "--have", nargs="+", default=[], help="Ingredient ids or names on hand"
    )
    parser.add_argument(
        "--min-match",
        type=int,
        default=50,
        help="Minimum match percentage to list a recipe",
    )
    parser.add_argument(
        "--sort-by",
        choices=SORT_FIELDS,
        default="match_percentage",
    )
    parser.add_argument("--limit", type=int, default=10, help="Recipes to show")
    args = parser.parse_args()

    index = RecipeIndex(load_catalog(args.catalog))
    available = resolve_ingredients(index, args.have)

    result = find_matching_recipes(
        index,
        available,
        minimum_match_percentage=args.min_match,
        sort_by=args.sort_by,
        sort_direction="asc" if args.sort_by in ("missing_count", "cook_time", "name") else "desc",
    )
    print(
        f"{len(result.matches)} of {result.total_recipes} recipes match: "
        f"{result.perfect_matches} perfect, {result.good_matches} good, "
        f"{result.partial_matches} partial"
    )
    for match in result.matches[: args.limit]:
        missing = ", ".join(match.missing_ingredients) or "-"
        print(f"  {match.match_percentage:3d}%  {match.recipe.name}  (missing: {missing})")

    suggestions = suggest_next_ingredients(index, available)
    if suggestions:
        print("Buy next:")
        for s in suggestions:
            print(
                f"  {s.ingredient.name}: unlocks {s.unlock_count}, "
                f"improves {s.improve_count}"
            )


if __name__ == "__main__":
    main()
