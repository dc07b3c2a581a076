import json

import pytest

from mealplan_utils.database import (
    create_schema,
    get_connection,
    get_ingredient_usage,
    load_catalog_from_db,
    save_recipe,
    transaction,
)
from mealplan_utils.ingredients import infer_ingredient_category
from mealplan_utils.recipes import (
    get_featured_recipes,
    get_recipe_by_slug,
    get_recipes_by_meal_type,
    load_catalog,
    recipe_from_dict,
    search_recipes,
)

SHAKSHUKA = {
    "id": "shakshuka",
    "name": "Shakshuka",
    "slug": "shakshuka",
    "description": "Eggs poached in a spiced tomato sauce",
    "mealType": "breakfast",
    "cuisine": "Middle Eastern",
    "dietaryTags": ["vegetarian", "gluten-free"],
    "prepTimeMinutes": 10,
    "cookTimeMinutes": 25,
    "servings": 4,
    "isFeatured": True,
    "ingredients": [
        {"ingredientId": "egg", "name": "Eggs", "category": "protein", "quantity": 6},
        {"ingredientId": "tomato", "name": "Crushed tomatoes", "quantity": 28, "unit": "oz"},
        {"ingredientId": "olive-oil", "name": "Extra virgin olive oil", "quantity": 2,
         "unit": "tbsp"},
        {"ingredientId": None, "name": "Grandma's spice blend", "notes": "optional"},
    ],
    "instructions": [
        {"step": 1, "text": "Warm the oil."},
        {"step": 2, "text": "Simmer the tomatoes.", "duration": 15},
    ],
}


def test_recipe_from_camel_case_record():
    recipe = recipe_from_dict(SHAKSHUKA)

    assert recipe.meal_type == "breakfast"
    assert recipe.dietary_tags == ["vegetarian", "gluten-free"]
    assert recipe.total_time_minutes == 35
    assert recipe.is_featured
    assert recipe.ingredient_ids == ["egg", "tomato", "olive-oil"]
    assert recipe.ingredients[3].ingredient_id is None
    assert recipe.instructions[1].duration == 15


def test_missing_categories_are_inferred():
    recipe = recipe_from_dict(SHAKSHUKA)
    assert [ing.category for ing in recipe.ingredients] == [
        "protein",
        "produce",
        "oils-vinegars",
        "other",
    ]


@pytest.mark.parametrize("missing", ["id", "name", "ingredients"])
def test_malformed_record_raises(missing):
    record = {k: v for k, v in SHAKSHUKA.items() if k != missing}
    with pytest.raises(ValueError, match=missing):
        recipe_from_dict(record)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Cherry tomatoes", "produce"),
        ("Greek yogurt", "dairy"),
        ("Chicken thighs", "protein"),
        ("Salmon fillet", "seafood"),
        ("Basmati rice", "grains"),
        ("Ground cumin", "herbs-spices"),
        ("Sea salt", "herbs-spices"),
        ("Soy sauce", "pantry"),
        ("Widget", "other"),
        ("", "other"),
    ],
)
def test_infer_ingredient_category(name, expected):
    assert infer_ingredient_category(name) == expected


@pytest.mark.parametrize("wrapped", [False, True])
def test_load_catalog(tmp_path, wrapped):
    path = tmp_path / "recipes.json"
    data = {"recipes": [SHAKSHUKA]} if wrapped else [SHAKSHUKA]
    path.write_text(json.dumps(data), encoding="utf-8")

    recipes = load_catalog(path)
    assert [r.id for r in recipes] == ["shakshuka"]


def test_load_catalog_rejects_other_layouts(tmp_path):
    path = tmp_path / "recipes.json"
    path.write_text(json.dumps({"items": []}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_catalog(path)


def test_catalog_lookups(make_recipe):
    recipes = [
        recipe_from_dict(SHAKSHUKA),
        make_recipe("stew", ["beef"], meal_type="dinner", slug="beef-stew"),
    ]
    assert get_recipe_by_slug(recipes, "beef-stew").id == "stew"
    assert get_recipe_by_slug(recipes, "nope") is None
    assert [r.id for r in get_featured_recipes(recipes)] == ["shakshuka"]
    assert [r.id for r in get_recipes_by_meal_type(recipes, "dinner")] == ["stew"]
    assert [r.id for r in search_recipes(recipes, "SPICE")] == ["shakshuka"]
    assert [r.id for r in search_recipes(recipes, "beef")] == ["stew"]


@pytest.fixture
def catalog_db(tmp_path, baking_recipes):
    db_path = tmp_path / "catalog.db"
    conn = get_connection(db_path)
    create_schema(conn)
    recipes = [recipe_from_dict(SHAKSHUKA)] + baking_recipes
    with transaction(conn) as cur:
        for recipe in recipes:
            save_recipe(cur, recipe)
    conn.close()
    return db_path


def test_database_round_trip(catalog_db):
    recipes = load_catalog_from_db(catalog_db)

    assert [r.id for r in recipes] == ["shakshuka", "r1", "r2", "r3"]
    shakshuka = recipes[0]
    assert shakshuka.ingredient_ids == ["egg", "tomato", "olive-oil"]
    assert shakshuka.ingredients[3].ingredient_id is None
    assert shakshuka.ingredients[3].notes == "optional"
    assert shakshuka.ingredients[1].quantity == 28.0
    assert shakshuka.ingredients[1].unit == "oz"
    assert shakshuka.ingredients[0].unit is None
    assert sorted(shakshuka.dietary_tags) == ["gluten-free", "vegetarian"]
    assert shakshuka.total_time_minutes == 35
    assert shakshuka.is_featured
    assert recipes[3].cuisine == "Japanese"
    assert recipes[3].dietary_tags == []


def test_save_recipe_replaces_lines(catalog_db, make_recipe):
    conn = get_connection(catalog_db)
    with transaction(conn) as cur:
        save_recipe(cur, make_recipe("r1", ["flour", "milk"]))
    conn.close()

    recipes = load_catalog_from_db(catalog_db)
    r1 = next(r for r in recipes if r.id == "r1")
    assert r1.ingredient_ids == ["flour", "milk"]


def test_transaction_rolls_back(catalog_db, make_recipe):
    conn = get_connection(catalog_db)
    with pytest.raises(RuntimeError):
        with transaction(conn) as cur:
            save_recipe(cur, make_recipe("new", ["salt"]))
            raise RuntimeError("boom")
    conn.close()

    assert "new" not in [r.id for r in load_catalog_from_db(catalog_db)]


def test_get_ingredient_usage(catalog_db):
    usage = get_ingredient_usage(catalog_db, min_recipe_count=2)
    assert usage["ingredient_id"].tolist() == ["egg", "flour", "sugar"]
    assert usage["recipe_count"].tolist() == [2, 2, 2]

    assert len(get_ingredient_usage(catalog_db)) == 8
