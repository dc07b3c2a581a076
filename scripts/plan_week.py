#!/usr/bin/env python3
"""
Suggest a week of meals that share ingredients, with its shopping list.
"""

import argparse
import datetime
import logging

from mealplan_utils import RecipeIndex
from mealplan_utils.recipes import load_catalog
from mealplan_utils.shopping import (
    aggregate_plan_ingredients,
    format_quantity,
    group_by_category,
)
from mealplan_utils.suggestions import (
    SuggestionPreferences,
    generate_week_plan,
    suggest_efficient_weekly_plan,
)

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    """Main function to print a suggested week plan."""
    parser = argparse.ArgumentParser(description="Suggest an ingredient-efficient week plan")
    parser.add_argument("--catalog", type=str, required=True, help="JSON recipe catalog")
    parser.add_argument(
        "--start-date",
        type=str,
        default=datetime.date.today().isoformat(),
        help="First day of the plan (YYYY-MM-DD)",
    )
    parser.add_argument("--tags", nargs="*", default=[], help="Dietary tags to require")
    parser.add_argument("--exclude", nargs="*", default=[], help="Recipe ids to skip")
    parser.add_argument(
        "--max-time", type=int, default=None, help="Maximum total time in minutes"
    )
    args = parser.parse_args()

    index = RecipeIndex(load_catalog(args.catalog))
    preferences = SuggestionPreferences(
        dietary_tags=args.tags,
        exclude_recipe_ids=args.exclude,
        max_cook_time_minutes=args.max_time,
    )

    days = generate_week_plan(index, args.start_date, preferences)
    for day in days:
        print(day.date)
        for slot in ("breakfast", "lunch", "dinner"):
            suggestion = getattr(day, slot)
            if suggestion:
                print(f"  {slot:<9} {suggestion.recipe.name}")

    plan = suggest_efficient_weekly_plan(index, 21, preferences)
    print(
        f"\n{plan.estimated_shopping_items} items to buy, "
        f"efficiency {plan.efficiency_score:.2f} uses per ingredient"
    )
    for section in group_by_category(aggregate_plan_ingredients(plan.recipes)):
        print(section.category_label)
        for item in section.items:
            print(f"  - {item.name}: {format_quantity(item.total_quantity, item.unit)}")


if __name__ == "__main__":
    main()
