import pytest

from mealplan_utils import RecipeIndex
from mealplan_utils.recipes.models import Recipe, RecipeIngredient


def _make_recipe(recipe_id, ingredient_ids, **kwargs):
    ingredients = [
        RecipeIngredient(
            name=ing_id.replace("-", " ").capitalize() if ing_id else "Mystery spice",
            ingredient_id=ing_id,
        )
        for ing_id in ingredient_ids
    ]
    kwargs.setdefault("name", recipe_id.upper())
    return Recipe(id=recipe_id, ingredients=ingredients, **kwargs)


@pytest.fixture
def make_recipe():
    return _make_recipe


@pytest.fixture
def baking_recipes():
    return [
        _make_recipe(
            "r1",
            ["flour", "sugar", "egg"],
            cuisine="Baking",
            prep_time_minutes=10,
            cook_time_minutes=20,
        ),
        _make_recipe(
            "r2",
            ["flour", "sugar", "butter"],
            cuisine="Baking",
            prep_time_minutes=5,
            cook_time_minutes=15,
        ),
        _make_recipe(
            "r3",
            ["rice", "fish"],
            cuisine="Japanese",
            prep_time_minutes=15,
            cook_time_minutes=25,
        ),
    ]


@pytest.fixture
def baking_index(baking_recipes):
    return RecipeIndex(baking_recipes)
