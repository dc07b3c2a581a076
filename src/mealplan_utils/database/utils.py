"""Database utility functions for recipe catalog databases."""

import contextlib
import logging
import pathlib
import sqlite3
from typing import Generator, List, Optional, Union

import pandas as pd

from mealplan_utils.recipes.models import Recipe, RecipeIngredient

logger = logging.getLogger(__name__)


def get_connection(db_path: Union[str, pathlib.Path]) -> sqlite3.Connection:
    """Get a SQLite database connection with foreign keys enabled.

    Args:
        db_path: Path to the SQLite database file

    Returns:
        SQLite connection with foreign keys enabled
    """
    conn = sqlite3.connect(db_path)
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextlib.contextmanager
def transaction(conn: sqlite3.Connection) -> Generator[sqlite3.Cursor, None, None]:
    """Context manager for database transactions.

    Args:
        conn: SQLite database connection

    Yields:
        Database cursor for executing queries

    Example:
        with transaction(conn) as cur:
            save_recipe(cur, recipe)
    """
    cur = conn.cursor()
    try:
        yield cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise


def upsert_ingredient(
    cur: sqlite3.Cursor, ingredient_id: str, name: str, category: str = "other"
) -> str:
    """Insert a master ingredient if its id is new and return the id.

    The first name and category stored for an id are kept.
    """
    cur.execute(
        "INSERT INTO ingredient(id, name, category) VALUES (?, ?, ?) "
        "ON CONFLICT(id) DO NOTHING",
        (ingredient_id, name, category),
    )
    return ingredient_id


def save_recipe(cur: sqlite3.Cursor, recipe: Recipe) -> None:
    """Insert or replace a recipe with its ingredient lines and dietary tags."""
    cur.execute(
        """
        INSERT OR REPLACE INTO recipe(
            id, name, slug, description, meal_type, cuisine, difficulty,
            prep_time_minutes, cook_time_minutes, total_time_minutes,
            servings, is_featured
        ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
        (
            recipe.id,
            recipe.name,
            recipe.slug,
            recipe.description,
            recipe.meal_type,
            recipe.cuisine,
            recipe.difficulty,
            recipe.prep_time_minutes,
            recipe.cook_time_minutes,
            recipe.total_time_minutes,
            recipe.servings,
            int(recipe.is_featured),
        ),
    )
    cur.execute("DELETE FROM recipe_ingredient WHERE recipe_id = ?", (recipe.id,))
    cur.execute("DELETE FROM recipe_tag WHERE recipe_id = ?", (recipe.id,))

    for position, ing in enumerate(recipe.ingredients):
        if ing.ingredient_id:
            upsert_ingredient(cur, ing.ingredient_id, ing.name, ing.category)
        cur.execute(
            """
            INSERT INTO recipe_ingredient(
                recipe_id, position, ingredient_id, name, category,
                quantity, unit, preparation, notes
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                recipe.id,
                position,
                ing.ingredient_id,
                ing.name,
                ing.category,
                ing.quantity,
                ing.unit,
                ing.preparation,
                ing.notes,
            ),
        )

    cur.executemany(
        "INSERT OR IGNORE INTO recipe_tag(recipe_id, tag) VALUES (?, ?)",
        [(recipe.id, tag) for tag in recipe.dietary_tags],
    )


def _optional(value) -> Optional[object]:
    return value if pd.notna(value) else None


def load_catalog_from_db(db_path: Union[str, pathlib.Path]) -> List[Recipe]:
    """Load every recipe in the database, in insertion order.

    Args:
        db_path: Path to the SQLite database

    Returns:
        Recipes with their ingredient lines (in position order) and dietary
        tags. Ingredient lines without an ingredient id keep ``None``.
    """
    conn = get_connection(db_path)
    try:
        recipes_df = pd.read_sql_query("SELECT * FROM recipe ORDER BY rowid", conn)
        ingredients_df = pd.read_sql_query(
            "SELECT * FROM recipe_ingredient ORDER BY recipe_id, position", conn
        )
        tags_df = pd.read_sql_query(
            "SELECT recipe_id, tag FROM recipe_tag ORDER BY rowid", conn
        )
    finally:
        conn.close()

    lines_by_recipe = {
        recipe_id: group for recipe_id, group in ingredients_df.groupby("recipe_id", sort=False)
    }
    tags_by_recipe = tags_df.groupby("recipe_id")["tag"].apply(list).to_dict()

    recipes = []
    for row in recipes_df.itertuples(index=False):
        lines = lines_by_recipe.get(row.id)
        ingredients = []
        if lines is not None:
            for line in lines.itertuples(index=False):
                ingredients.append(
                    RecipeIngredient(
                        name=line.name,
                        ingredient_id=_optional(line.ingredient_id),
                        category=_optional(line.category) or "other",
                        quantity=float(line.quantity) if pd.notna(line.quantity) else None,
                        unit=_optional(line.unit),
                        preparation=_optional(line.preparation),
                        notes=_optional(line.notes),
                        id=str(line.position),
                    )
                )

        recipes.append(
            Recipe(
                id=row.id,
                name=row.name,
                ingredients=ingredients,
                slug=_optional(row.slug),
                description=_optional(row.description) or "",
                meal_type=row.meal_type,
                cuisine=_optional(row.cuisine) or "",
                dietary_tags=tags_by_recipe.get(row.id, []),
                difficulty=_optional(row.difficulty) or "easy",
                prep_time_minutes=int(row.prep_time_minutes),
                cook_time_minutes=int(row.cook_time_minutes),
                total_time_minutes=int(row.total_time_minutes)
                if pd.notna(row.total_time_minutes)
                else None,
                servings=int(row.servings),
                is_featured=bool(row.is_featured),
            )
        )

    logger.info(f"Loaded {len(recipes)} recipes from {db_path}")
    return recipes


def get_ingredient_usage(db_path: Union[str, pathlib.Path], min_recipe_count: int = 1) -> pd.DataFrame:
    """Count distinct recipes per linked ingredient.

    Returns:
        DataFrame with columns ingredient_id, name, category and recipe_count,
        most used first.
    """
    conn = get_connection(db_path)
    try:
        return pd.read_sql_query(
            """
            SELECT
                i.id AS ingredient_id,
                i.name,
                i.category,
                COUNT(DISTINCT ri.recipe_id) AS recipe_count
            FROM ingredient i
            JOIN recipe_ingredient ri ON i.id = ri.ingredient_id
            GROUP BY i.id, i.name, i.category
            HAVING recipe_count >= ?
            ORDER BY recipe_count DESC, i.id
            """,
            conn,
            params=(min_recipe_count,),
        )
    finally:
        conn.close()
