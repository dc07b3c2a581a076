import threading

import mealplan_utils.index
from mealplan_utils import RecipeIndex
from mealplan_utils.recipes.models import RecipeIngredient


def test_structures_are_built_once(baking_recipes, mocker):
    master_spy = mocker.spy(mealplan_utils.index, "build_master_ingredient_list")
    overlap_spy = mocker.spy(mealplan_utils.index, "build_overlap_matrix")
    index = RecipeIndex(baking_recipes)

    master_spy.assert_not_called()
    overlap_spy.assert_not_called()

    first = index.master_ingredients
    assert index.master_ingredients is first
    index.get_ingredient("flour")
    index.get_overlaps("r1")
    index.get_overlaps("r2")

    master_spy.assert_called_once()
    overlap_spy.assert_called_once()


def test_concurrent_first_access_builds_once(make_recipe, mocker):
    recipes = [make_recipe(f"r{i}", [f"ing-{i % 7}", f"ing-{i % 11}"]) for i in range(60)]
    overlap_spy = mocker.spy(mealplan_utils.index, "build_overlap_matrix")
    index = RecipeIndex(recipes)

    barrier = threading.Barrier(8)
    results = []

    def reader():
        barrier.wait()
        results.append(index.overlap_matrix)

    threads = [threading.Thread(target=reader) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    overlap_spy.assert_called_once()
    assert all(result is results[0] for result in results)
    assert len(results[0]) == 60


def test_clear_cache_rebuilds(baking_index, mocker):
    spy = mocker.spy(mealplan_utils.index, "build_master_ingredient_list")
    baking_index.master_ingredients
    baking_index.clear_cache()
    baking_index.master_ingredients
    assert spy.call_count == 2


def test_unknown_ids(baking_index):
    assert baking_index.get_overlaps("missing") == []
    assert baking_index.get_recipe("missing") is None
    assert baking_index.get_ingredient("saffron") is None


def test_lookups(baking_index):
    assert baking_index.get_recipe("r2").name == "R2"
    assert baking_index.get_ingredient("egg").recipe_ids == ["r1"]
    assert len(baking_index) == 3


def test_ingredients_by_category(make_recipe):
    recipe = make_recipe("a", [])
    recipe.ingredients = [
        RecipeIngredient("Salt", "salt", "herbs-spices"),
        RecipeIngredient("Cumin", "cumin", "herbs-spices"),
        RecipeIngredient("Rice", "rice", "grains"),
    ]
    index = RecipeIndex([recipe])
    assert [i.id for i in index.get_ingredients_by_category("herbs-spices")] == [
        "salt",
        "cumin",
    ]
    assert index.get_ingredients_by_category("dairy") == []


def test_ingredient_stats(baking_index):
    stats = baking_index.get_ingredient_stats()
    assert stats["total_unique_ingredients"] == 6
    assert stats["total_recipes"] == 3
    assert stats["most_common"][0] == {"name": "Flour", "frequency": 2}
    assert stats["by_category"] == {"other": 6}


def test_empty_catalog():
    index = RecipeIndex([])
    assert index.master_ingredients == []
    assert index.overlap_matrix == {}
    assert index.get_ingredient_stats()["most_common"] == []


def test_duplicate_recipe_ids_keep_first(make_recipe, caplog):
    first = make_recipe("dup", ["salt"])
    second = make_recipe("dup", ["pepper"])
    index = RecipeIndex([first, second])

    assert index.get_recipe("dup") is first
    assert len(index) == 2
    assert "Duplicate recipe id 'dup'" in caplog.text


def test_duplicate_recipe_ids_agree_across_lookups(make_recipe):
    first = make_recipe("dup", ["salt", "pepper"])
    index = RecipeIndex([first, make_recipe("dup", ["flour"]), make_recipe("other", ["salt"])])

    (best, _) = index.get_overlaps("dup")
    assert index.get_recipe("dup") is first
    assert best.shared_ingredients == ["salt"]
