"""Database utilities for recipe catalog databases."""

from .schema import DDL, create_schema
from .utils import (
    get_connection,
    get_ingredient_usage,
    load_catalog_from_db,
    save_recipe,
    transaction,
    upsert_ingredient,
)

__all__ = [
    "DDL",
    "create_schema",
    "get_connection",
    "transaction",
    "upsert_ingredient",
    "save_recipe",
    "load_catalog_from_db",
    "get_ingredient_usage",
]
