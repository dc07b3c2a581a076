"""Search alias generation for master ingredients."""

import re
from typing import Dict, List

# Curated synonyms, matched when the ingredient name contains the key or the
# key contains the ingredient name.
ALIAS_MAP: Dict[str, List[str]] = {
    "greek yogurt": ["yogurt", "yoghurt", "greek"],
    "olive oil": ["evoo", "oil", "extra virgin"],
    "extra virgin olive oil": ["olive oil", "evoo", "oil"],
    "feta cheese": ["feta", "cheese"],
    "parmesan cheese": ["parmesan", "parm", "parmigiano"],
    "red onion": ["onion", "red"],
    "yellow onion": ["onion", "yellow"],
    "garlic cloves": ["garlic"],
    "cherry tomatoes": ["tomatoes", "cherry", "tomato"],
    "roma tomatoes": ["tomatoes", "roma", "tomato"],
    "fresh basil": ["basil", "fresh"],
    "dried oregano": ["oregano", "dried"],
    "fresh parsley": ["parsley", "fresh"],
    "fresh mint": ["mint", "fresh"],
    "fresh dill": ["dill", "fresh"],
    "lemon juice": ["lemon", "juice"],
    "lemon zest": ["lemon", "zest"],
    "chicken breast": ["chicken", "breast"],
    "ground lamb": ["lamb", "ground"],
    "salmon fillets": ["salmon", "fish"],
    "shrimp": ["prawns", "seafood"],
    "chickpeas": ["garbanzo", "beans"],
    "cannellini beans": ["white beans", "beans"],
    "quinoa": ["grain"],
    "couscous": ["grain"],
    "pita bread": ["pita", "bread"],
    "flatbread": ["bread", "flat"],
}


def plural_variant(name: str) -> str:
    """Return a naive singular/plural counterpart of ``name``.

    Names ending in "s" lose it when longer than three characters, other names
    gain one. Short names ending in "s" ("gas") have no variant and are
    returned unchanged.
    """
    if name.endswith("s"):
        return name[:-1] if len(name) > 3 else name
    return name + "s"


def generate_aliases(name: str, ingredient_id: str) -> List[str]:
    """Generate lowercase search aliases for an ingredient.

    Args:
        name: Display name of the ingredient.
        ingredient_id: Normalized ingredient id, e.g. "olive-oil".

    Returns:
        Deduplicated aliases in generation order: the lowercase name, the id
        with separators replaced by spaces, curated synonyms and a plural
        variant.

    Examples:
        >>> generate_aliases("Olive oil", "olive-oil")
        ["olive oil", "evoo", "oil", "extra virgin", "olive oils"]
    """
    lower = name.lower()
    aliases = [lower, re.sub(r"[-_]", " ", ingredient_id)]

    for key, values in ALIAS_MAP.items():
        if key in lower or lower in key:
            aliases.extend(values)

    aliases.append(plural_variant(lower))

    return list(dict.fromkeys(aliases))
