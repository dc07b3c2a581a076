import dataclasses
from typing import List


@dataclasses.dataclass
class MasterIngredient:
    id: str
    name: str
    category: str
    aliases: List[str]
    recipe_ids: List[str]
    frequency: int


@dataclasses.dataclass
class IngredientOverlap:
    recipe_a: str
    recipe_b: str
    shared_ingredients: List[str]
    overlap_score: float  # Jaccard similarity, 0-1
    shared_count: int
    total_unique_ingredients: int


@dataclasses.dataclass
class IngredientSuggestion:
    ingredient: MasterIngredient
    unlock_count: int  # recipes that become fully available
    improve_count: int  # near-miss recipes whose match % would go up
