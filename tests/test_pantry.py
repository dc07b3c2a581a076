import pytest

from mealplan_utils import RecipeIndex
from mealplan_utils.matching import (
    PantryFinderPreferences,
    can_make_recipe,
    find_matching_recipes,
    get_easy_recipes,
    get_most_common_ingredients,
    match_recipe,
    raw_match_percentage,
    suggest_next_ingredients,
)


def test_pantry_scenario(baking_index):
    result = find_matching_recipes(baking_index, {"flour", "sugar"})

    assert [(m.recipe_id, m.match_percentage) for m in result.matches] == [
        ("r1", 67),
        ("r2", 67),
        ("r3", 0),
    ]
    assert result.matches[0].matched_ingredients == ["flour", "sugar"]
    assert result.matches[0].missing_ingredients == ["egg"]
    assert result.total_recipes == 3
    assert result.perfect_matches == 0
    assert result.good_matches == 0
    assert result.partial_matches == 2


def test_full_pantry_is_perfect(baking_index):
    result = find_matching_recipes(baking_index, ["flour", "sugar", "egg", "butter"])
    r1 = next(m for m in result.matches if m.recipe_id == "r1")
    assert r1.match_percentage == 100
    assert r1.missing_count == 0
    assert result.perfect_matches == 2
    assert result.good_matches == 2


def test_minimum_match_filters(baking_index):
    result = find_matching_recipes(
        baking_index, {"flour", "sugar", "egg"}, minimum_match_percentage=100
    )
    assert [m.recipe_id for m in result.matches] == ["r1"]
    # aggregates only count what passed the filter
    assert result.total_recipes == 3
    assert result.perfect_matches == 1


@pytest.mark.parametrize("minimum, expected", [(66, ["r1", "r2"]), (67, [])])
def test_minimum_compares_unrounded_percentage(baking_index, minimum, expected):
    # 2 of 3 is reported as 67 but is 66.7 before rounding
    result = find_matching_recipes(
        baking_index, {"flour", "sugar"}, minimum_match_percentage=minimum
    )
    assert [m.recipe_id for m in result.matches] == expected


def test_minimum_of_100_requires_nothing_missing(make_recipe):
    big = make_recipe("big", [f"i{n}" for n in range(200)])
    small = make_recipe("small", ["i0", "i1"])
    index = RecipeIndex([big, small])
    pantry = {f"i{n}" for n in range(199)}

    assert match_recipe(big, pantry).match_percentage == 100
    result = find_matching_recipes(index, pantry, minimum_match_percentage=100)
    assert [m.recipe_id for m in result.matches] == ["small"]
    assert result.perfect_matches == 1


@pytest.mark.parametrize(
    "matched, missing, expected",
    [(2, 1, 200 / 3), (199, 1, 99.5), (0, 0, 0.0), (4, 0, 100.0)],
)
def test_raw_match_percentage(make_recipe, matched, missing, expected):
    recipe = make_recipe("a", [f"i{n}" for n in range(matched + missing)])
    match = match_recipe(recipe, {f"i{n}" for n in range(matched)})
    assert raw_match_percentage(match) == pytest.approx(expected)


def test_percentages_within_bounds(make_recipe):
    recipes = [
        make_recipe("a", ["a1", "a2", "a3", "a4", "a5", "a6", "a7", "a8"]),
        make_recipe("b", [None, None]),
        make_recipe("c", []),
        make_recipe("d", ["a1", None]),
    ]
    index = RecipeIndex(recipes)
    for pantry in [set(), {"a1"}, {"a1", "a2", "a3"}, {f"a{i}" for i in range(1, 9)}]:
        for match in find_matching_recipes(index, pantry).matches:
            assert 0 <= match.match_percentage <= 100


@pytest.mark.parametrize(
    "available, expected",
    [
        ({"a1"}, 13),  # 12.5 rounds up
        ({"a1", "a2", "a3"}, 38),  # 37.5 rounds up
        ({"a1", "a2"}, 25),
    ],
)
def test_percentage_rounds_half_up(make_recipe, available, expected):
    recipe = make_recipe("a", [f"a{i}" for i in range(1, 9)])
    assert match_recipe(recipe, available).match_percentage == expected


def test_unlinked_ingredients_do_not_count(make_recipe):
    recipe = make_recipe("a", ["salt", None, None])
    match = match_recipe(recipe, {"salt"})
    assert match.match_percentage == 100
    assert match.missing_ingredients == []

    assert match_recipe(make_recipe("b", [None]), {"salt"}).match_percentage == 0


@pytest.mark.parametrize(
    "sort_by, sort_direction, expected",
    [
        ("match_percentage", "desc", ["r1", "r2", "r3"]),
        ("match_percentage", "asc", ["r3", "r1", "r2"]),
        ("missing_count", "asc", ["r1", "r2", "r3"]),
        ("cook_time", "asc", ["r2", "r1", "r3"]),
        ("cook_time", "desc", ["r3", "r1", "r2"]),
        ("name", "desc", ["r3", "r2", "r1"]),
    ],
)
def test_sorting(baking_index, sort_by, sort_direction, expected):
    result = find_matching_recipes(
        baking_index, {"flour", "sugar"}, sort_by=sort_by, sort_direction=sort_direction
    )
    assert [m.recipe_id for m in result.matches] == expected


def test_preferences_object(baking_index):
    preferences = PantryFinderPreferences(
        minimum_match_percentage=50, sort_by="name", sort_direction="asc"
    )
    result = find_matching_recipes(baking_index, {"flour", "sugar"}, preferences=preferences)
    assert [m.recipe_id for m in result.matches] == ["r1", "r2"]


@pytest.mark.parametrize("options", [{"sort_by": "rating"}, {"sort_direction": "up"}])
def test_invalid_sort_options(baking_index, options):
    with pytest.raises(ValueError):
        find_matching_recipes(baking_index, set(), **options)


def test_empty_catalog():
    result = find_matching_recipes(RecipeIndex([]), {"flour"})
    assert result.matches == []
    assert result.total_recipes == 0
    assert result.perfect_matches == 0


def test_suggest_next_ingredients_scenario(baking_index):
    suggestions = suggest_next_ingredients(baking_index, {"flour", "sugar"})
    assert [s.ingredient.id for s in suggestions] == ["egg", "butter"]
    assert all(s.unlock_count == 1 and s.improve_count == 1 for s in suggestions)


def test_unlock_and_improve_counts(make_recipe):
    recipes = [
        make_recipe("bruschetta", ["garlic", "onion", "tomato", "basil"]),
        make_recipe("pesto-pasta", ["garlic", "onion", "basil", "pasta"]),
        make_recipe("basil-garlic", ["garlic", "basil"]),
        make_recipe("far", ["garlic", "rice", "fish", "nori", "soy", "ginger", "sesame"]),
        make_recipe("done", ["garlic", "onion"]),
    ]
    index = RecipeIndex(recipes)
    suggestions = suggest_next_ingredients(index, {"garlic", "onion"}, limit=10)
    by_id = {s.ingredient.id: s for s in suggestions}

    assert [s.ingredient.id for s in suggestions][0] == "basil"
    assert (by_id["basil"].unlock_count, by_id["basil"].improve_count) == (1, 3)
    assert (by_id["tomato"].unlock_count, by_id["tomato"].improve_count) == (0, 1)
    # "far" is under 50% so its ingredients never show up
    assert "nori" not in by_id
    assert "garlic" not in by_id and "onion" not in by_id


def test_unlock_correctness(make_recipe):
    recipe = make_recipe("r", ["a", "b", "c", "x"])
    index = RecipeIndex([recipe])
    suggestions = suggest_next_ingredients(index, {"a", "b", "c"})
    assert suggestions[0].ingredient.id == "x"
    assert suggestions[0].unlock_count >= 1


def test_suggestions_skip_recipes_missing_more_than_three(make_recipe):
    recipe = make_recipe("big", [f"i{n}" for n in range(10)])
    index = RecipeIndex([recipe])
    # 6 of 10 available: 60% matched but 4 missing
    assert suggest_next_ingredients(index, {f"i{n}" for n in range(6)}) == []


def test_suggestions_empty_when_nothing_close(baking_index):
    assert suggest_next_ingredients(baking_index, set()) == []


def test_suggestion_limit(baking_index):
    assert len(suggest_next_ingredients(baking_index, {"flour", "sugar"}, limit=1)) == 1


def test_can_make_recipe(baking_index):
    assert can_make_recipe(baking_index, "r1", ["flour", "sugar", "egg"]) == {
        "can_make": True,
        "match_percentage": 100,
        "missing": [],
    }
    assert can_make_recipe(baking_index, "r1", ["flour"]) == {
        "can_make": False,
        "match_percentage": 33,
        "missing": ["sugar", "egg"],
    }
    assert can_make_recipe(baking_index, "nope", ["flour"]) == {
        "can_make": False,
        "match_percentage": 0,
        "missing": [],
    }


def test_get_easy_recipes(make_recipe):
    recipes = [
        make_recipe("salad", ["olive-oil", "lemon", "cucumber"]),
        make_recipe("tagine", ["onion", "lamb", "apricot", "couscous", "almond"]),
        make_recipe("soup", ["onion", "garlic", "lentil", "carrot"]),
    ]
    easy = get_easy_recipes(RecipeIndex(recipes), max_missing_ingredients=2)
    assert [m.recipe_id for m in easy] == ["salad", "soup"]


def test_most_common_ingredients(baking_index):
    assert [i.id for i in get_most_common_ingredients(baking_index, limit=2)] == [
        "flour",
        "sugar",
    ]
