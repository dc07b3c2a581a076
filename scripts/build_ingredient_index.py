#!/usr/bin/env python3
"""
Build the master ingredient list and recipe overlap table for a catalog.
Reads recipes from a JSON file or a SQLite database and writes both tables
to CSV for inspection.
"""

import argparse
import datetime
import logging
import pathlib

import pandas as pd
from tqdm.auto import tqdm

from mealplan_utils import RecipeIndex
from mealplan_utils.database import load_catalog_from_db
from mealplan_utils.recipes import load_catalog

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def master_ingredients_frame(index: RecipeIndex) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "ingredient_id": ing.id,
                "name": ing.name,
                "category": ing.category,
                "frequency": ing.frequency,
                "aliases": "|".join(ing.aliases),
                "recipe_ids": "|".join(ing.recipe_ids),
            }
            for ing in index.master_ingredients
        ]
    )


def overlap_frame(index: RecipeIndex, min_score: float = 0.0) -> pd.DataFrame:
    rows = []
    for recipe_id, overlaps in tqdm(index.overlap_matrix.items(), desc="Overlap rows"):
        for rank, overlap in enumerate(overlaps, start=1):
            if overlap.overlap_score < min_score:
                break
            rows.append(
                {
                    "recipe_a": recipe_id,
                    "recipe_b": overlap.recipe_b,
                    "rank": rank,
                    "overlap_score": overlap.overlap_score,
                    "shared_count": overlap.shared_count,
                    "total_unique_ingredients": overlap.total_unique_ingredients,
                    "shared_ingredients": "|".join(overlap.shared_ingredients),
                }
            )
    return pd.DataFrame(rows)


def main():
    """Main function to build and export the ingredient index."""
    parser = argparse.ArgumentParser(
        description="Export master ingredients and recipe overlaps for a recipe catalog"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--catalog", type=str, help="Path to a JSON recipe catalog")
    source.add_argument("--db-path", type=str, help="Path to a SQLite recipe database")
    parser.add_argument(
        "--min-score",
        type=float,
        default=0.0,
        help="Only export overlaps with at least this Jaccard score",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="data",
        help="Output directory for CSV files",
    )
    args = parser.parse_args()

    if args.catalog:
        recipes = load_catalog(args.catalog)
    else:
        recipes = load_catalog_from_db(args.db_path)

    if not recipes:
        print("No recipes found. Exiting.")
        return

    index = RecipeIndex(recipes)
    ingredients_df = master_ingredients_frame(index)
    overlaps_df = overlap_frame(index, args.min_score)

    output_dir = pathlib.Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    ingredients_file = output_dir / f"master_ingredients_{timestamp}.csv"
    overlaps_file = output_dir / f"recipe_overlaps_{timestamp}.csv"
    ingredients_df.to_csv(ingredients_file, index=False)
    overlaps_df.to_csv(overlaps_file, index=False)

    stats = index.get_ingredient_stats()
    print("Successfully built ingredient index:")
    print(f"  - Recipes: {stats['total_recipes']}")
    print(f"  - Unique ingredients: {stats['total_unique_ingredients']}")
    print(f"  - Overlap rows: {len(overlaps_df)}")
    print(f"  - Files: {ingredients_file}, {overlaps_file}")


if __name__ == "__main__":
    main()
