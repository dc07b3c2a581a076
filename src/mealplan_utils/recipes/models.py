"""Recipe data models."""

import dataclasses
from typing import List, Optional

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack", "any")
MEAL_SLOT_TYPES = ("breakfast", "lunch", "dinner")
DIFFICULTIES = ("easy", "medium", "hard")

INGREDIENT_CATEGORIES = (
    "produce",
    "dairy",
    "protein",
    "grains",
    "pantry",
    "oils-vinegars",
    "herbs-spices",
    "nuts-seeds",
    "seafood",
    "beverages",
    "other",
)


@dataclasses.dataclass
class RecipeIngredient:
    """A single ingredient line on a recipe.

    ``ingredient_id`` is None for user-authored ingredients that are not linked
    to a normalized ingredient. Such lines are shown to the user but never take
    part in matching, overlap or suggestions.
    """

    name: str
    ingredient_id: Optional[str] = None
    category: str = "other"
    quantity: Optional[float] = None  # None means "to taste"
    unit: Optional[str] = None
    preparation: Optional[str] = None
    notes: Optional[str] = None
    id: Optional[str] = None


@dataclasses.dataclass
class Instruction:
    step: int
    text: str
    duration: Optional[int] = None
    tip: Optional[str] = None


@dataclasses.dataclass
class NutritionInfo:
    calories: float
    protein: float
    carbohydrates: float
    fat: float
    fiber: float
    sodium: Optional[float] = None
    sugar: Optional[float] = None


@dataclasses.dataclass
class Recipe:
    """Dataclass for holding a catalog recipe."""

    id: str
    name: str
    ingredients: List[RecipeIngredient]
    slug: Optional[str] = None
    description: str = ""
    meal_type: str = "any"
    cuisine: str = ""
    dietary_tags: List[str] = dataclasses.field(default_factory=list)
    difficulty: str = "easy"
    prep_time_minutes: int = 0
    cook_time_minutes: int = 0
    total_time_minutes: Optional[int] = None
    servings: int = 1
    instructions: List[Instruction] = dataclasses.field(default_factory=list)
    tips: Optional[str] = None
    nutrition: Optional[NutritionInfo] = None
    image_url: Optional[str] = None
    is_featured: bool = False

    def __post_init__(self):
        if self.total_time_minutes is None:
            self.total_time_minutes = self.prep_time_minutes + self.cook_time_minutes

    @property
    def ingredient_ids(self) -> List[str]:
        """Identified ingredient ids in recipe order, without duplicates."""
        seen = set()
        ids = []
        for ingredient in self.ingredients:
            if ingredient.ingredient_id and ingredient.ingredient_id not in seen:
                seen.add(ingredient.ingredient_id)
                ids.append(ingredient.ingredient_id)
        return ids

    def find_ingredient(self, ingredient_id: str) -> Optional[RecipeIngredient]:
        """Return the first ingredient line linked to ``ingredient_id``."""
        for ingredient in self.ingredients:
            if ingredient.ingredient_id == ingredient_id:
                return ingredient
        return None
