"""Ingredient category inference for ingredients without a catalog category."""

from typing import Dict, List, Mapping

# Checked in this order; the first category with a matching keyword wins.
CATEGORY_KEYWORDS: Dict[str, List[str]] = {
    "produce": [
        "tomato", "onion", "garlic", "pepper", "lettuce", "spinach", "carrot",
        "cucumber", "zucchini", "eggplant", "lemon", "lime", "orange", "apple",
        "berry", "strawberry", "blueberry", "avocado", "potato", "celery",
        "broccoli", "cauliflower", "cabbage", "kale", "arugula", "mushroom",
        "asparagus", "artichoke", "beet", "radish", "squash", "pumpkin",
        "grape", "banana", "mango", "pineapple", "peach", "pear", "plum",
        "cherry", "fig", "date", "pomegranate", "melon", "watermelon",
        "ginger", "scallion", "shallot", "leek", "fennel", "chard",
    ],
    "dairy": [
        "milk", "cheese", "yogurt", "cream", "butter", "feta", "parmesan",
        "mozzarella", "ricotta", "cottage", "cheddar", "brie", "goat cheese",
        "halloumi", "labneh", "kefir", "sour cream", "creme fraiche",
        "mascarpone", "gruyere", "pecorino", "manchego",
    ],
    "protein": [
        "chicken", "beef", "pork", "lamb", "turkey", "egg", "tofu", "tempeh",
        "duck", "veal", "bacon", "sausage", "ham", "prosciutto", "ground meat",
        "steak", "roast", "chop", "thigh", "breast", "wing", "leg",
        "seitan", "edamame", "lentil", "bean", "chickpea", "hummus",
    ],
    "seafood": [
        "fish", "salmon", "shrimp", "tuna", "cod", "tilapia", "scallop",
        "mussel", "clam", "oyster", "crab", "lobster", "squid", "calamari",
        "octopus", "anchovy", "sardine", "mackerel", "halibut", "trout",
        "bass", "snapper", "mahi", "swordfish", "prawn", "crawfish",
    ],
    "grains": [
        "rice", "pasta", "bread", "flour", "oat", "quinoa", "couscous",
        "bulgur", "pita", "tortilla", "noodle", "barley", "farro", "polenta",
        "cornmeal", "wheat", "rye", "millet", "buckwheat", "orzo", "risotto",
        "spaghetti", "penne", "linguine", "fettuccine", "macaroni", "lasagna",
        "cracker", "breadcrumb", "panko", "croissant", "bagel", "baguette",
    ],
    "oils-vinegars": [
        "oil", "olive", "vinegar", "balsamic", "coconut oil", "sesame oil",
        "vegetable oil", "canola", "avocado oil", "sunflower oil", "ghee",
        "red wine vinegar", "white wine vinegar", "apple cider vinegar",
        "rice vinegar", "sherry vinegar", "champagne vinegar",
    ],
    "herbs-spices": [
        "basil", "oregano", "thyme", "rosemary", "cumin", "paprika",
        "cinnamon", "salt", "pepper", "parsley", "cilantro", "mint", "dill",
        "sage", "tarragon", "chive", "bay leaf", "coriander", "turmeric",
        "ginger", "nutmeg", "clove", "cardamom", "saffron", "sumac",
        "zaatar", "harissa", "cayenne", "chili", "curry", "allspice",
        "fennel seed", "mustard seed", "caraway", "anise", "vanilla",
    ],
    "nuts-seeds": [
        "almond", "walnut", "pistachio", "pine nut", "sesame", "tahini",
        "cashew", "pecan", "hazelnut", "macadamia", "peanut", "chestnut",
        "sunflower seed", "pumpkin seed", "chia", "flax", "hemp seed",
        "poppy seed", "nut butter", "almond butter", "peanut butter",
    ],
    "pantry": [
        "honey", "sugar", "stock", "broth", "sauce", "paste", "can", "dried",
        "tomato paste", "tomato sauce", "soy sauce", "fish sauce", "worcestershire",
        "maple syrup", "molasses", "agave", "jam", "jelly", "preserve",
        "mustard", "ketchup", "mayonnaise", "hot sauce", "sriracha",
        "capers", "olive", "relish", "sun-dried", "roasted",
        "cornstarch", "baking powder", "baking soda", "yeast", "gelatin",
        "coconut milk", "condensed milk", "evaporated milk",
    ],
    "beverages": [
        "wine", "juice", "water", "tea", "coffee", "beer", "cider",
        "sparkling", "soda", "lemonade", "smoothie", "shake",
        "espresso", "matcha", "chai",
    ],
}


def infer_ingredient_category(name: str) -> str:
    """Infer an ingredient category from its name by keyword containment.

    Args:
        name: Ingredient name as written on the recipe.

    Returns:
        The first category whose keyword list matches, or ``"other"``.

    Examples:
        >>> infer_ingredient_category("Cherry tomatoes")
        "produce"
        >>> infer_ingredient_category("Soy sauce")
        "pantry"
    """
    if not name:
        return "other"

    lower = name.lower()
    for category, keywords in CATEGORY_KEYWORDS.items():
        if any(keyword in lower for keyword in keywords):
            return category
    return "other"


def infer_ingredient_categories(ingredients: List[Mapping[str, str]]) -> List[str]:
    """Infer categories for ingredient records carrying a ``name`` or ``text`` key."""
    return [
        infer_ingredient_category(ing.get("name") or ing.get("text") or "")
        for ing in ingredients
    ]
