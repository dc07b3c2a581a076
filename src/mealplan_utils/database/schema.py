"""Database schema definitions for recipe catalog databases."""

import sqlite3

DDL = """
CREATE TABLE IF NOT EXISTS ingredient(
    id       TEXT PRIMARY KEY,
    name     TEXT NOT NULL,
    category TEXT NOT NULL DEFAULT 'other'
);

CREATE TABLE IF NOT EXISTS recipe(
    id                 TEXT PRIMARY KEY,
    name               TEXT NOT NULL,
    slug               TEXT UNIQUE,
    description        TEXT,
    meal_type          TEXT NOT NULL DEFAULT 'any',
    cuisine            TEXT,
    difficulty         TEXT,
    prep_time_minutes  INTEGER NOT NULL DEFAULT 0,
    cook_time_minutes  INTEGER NOT NULL DEFAULT 0,
    total_time_minutes INTEGER,
    servings           INTEGER NOT NULL DEFAULT 1,
    is_featured        INTEGER NOT NULL DEFAULT 0
);

CREATE TABLE IF NOT EXISTS recipe_ingredient(
    recipe_id     TEXT NOT NULL,
    position      INTEGER NOT NULL,
    ingredient_id TEXT,
    name          TEXT NOT NULL,
    category      TEXT,
    quantity      REAL,
    unit          TEXT,
    preparation   TEXT,
    notes         TEXT,
    PRIMARY KEY(recipe_id, position),
    FOREIGN KEY(recipe_id)     REFERENCES recipe(id)     ON DELETE CASCADE,
    FOREIGN KEY(ingredient_id) REFERENCES ingredient(id) ON DELETE SET NULL
);

CREATE TABLE IF NOT EXISTS recipe_tag(
    recipe_id TEXT NOT NULL,
    tag       TEXT NOT NULL,
    PRIMARY KEY(recipe_id, tag),
    FOREIGN KEY(recipe_id) REFERENCES recipe(id) ON DELETE CASCADE
);
"""


def create_schema(conn: sqlite3.Connection) -> None:
    """Create the database schema for the recipe catalog.

    Args:
        conn: SQLite database connection
    """
    conn.executescript(DDL)
    conn.execute("PRAGMA foreign_keys = ON")
