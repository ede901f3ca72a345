"""Lookup tables used by the scoring rules."""

import re

from nutriscan.domain.profile import DietPreference

HIGH_RISK_ADDITIVES: tuple[str, ...] = (
    "aspartame",
    "sucralose",
    "acesulfame potassium",
    "sodium benzoate",
    "potassium sorbate",
    "bha",
    "bht",
    "tbhq",
    "propyl gallate",
    "sodium nitrite",
    "sodium nitrate",
    "monosodium glutamate",
    "msg",
    "red dye 40",
    "yellow dye 5",
    "blue dye 1",
    "caramel color",
    "phosphoric acid",
    "sodium phosphate",
    "calcium phosphate",
)

MODERATE_RISK_ADDITIVES: tuple[str, ...] = (
    "citric acid",
    "ascorbic acid",
    "tocopherols",
    "lecithin",
    "carrageenan",
    "xanthan gum",
    "guar gum",
    "locust bean gum",
    "natural flavors",
    "artificial flavors",
    "modified corn starch",
    "maltodextrin",
    "dextrose",
    "corn syrup",
    "high fructose corn syrup",
)

# Matched against the first ingredient only.
WHOLE_FOODS: tuple[str, ...] = (
    "milk",
    "water",
    "oats",
    "wheat",
    "rice",
    "quinoa",
    "beef",
    "chicken",
    "turkey",
    "fish",
    "salmon",
    "tuna",
    "eggs",
    "beans",
    "lentils",
    "chickpeas",
    "almonds",
    "walnuts",
    "cashews",
    "peanuts",
    "coconut",
    "olive oil",
    "avocado oil",
    "butter",
    "cheese",
    "yogurt",
    "tomatoes",
    "spinach",
    "kale",
    "broccoli",
    "carrots",
    "sweet potato",
    "apple",
    "banana",
    "berries",
    "strawberries",
    "blueberries",
)

# Emulsifiers, sweeteners and dyes.
PROCESSING_INDICATORS: tuple[str, ...] = (
    "polysorbate",
    "mono- and diglycerides",
    "sodium stearoyl lactylate",
    "lecithin",
    "carrageenan",
    "aspartame",
    "sucralose",
    "stevia",
    "erythritol",
    "xylitol",
    "red dye",
    "yellow dye",
    "blue dye",
    "caramel color",
    "annatto",
    "turmeric color",
)

SEED_OILS: tuple[str, ...] = (
    "soybean oil",
    "canola oil",
    "corn oil",
    "sunflower oil",
    "safflower oil",
    "cottonseed oil",
)

ADDED_SUGARS: tuple[str, ...] = (
    "corn syrup",
    "high fructose corn syrup",
    "cane sugar",
    "brown sugar",
    "dextrose",
    "maltose",
    "sucrose",
)

PROCESSED_INGREDIENT_COUNT = 12


def _pattern(*terms: str) -> re.Pattern[str]:
    return re.compile("|".join(re.escape(term) for term in terms), re.IGNORECASE)


DIET_VIOLATION_PATTERNS: dict[DietPreference, re.Pattern[str]] = {
    DietPreference.VEGAN: _pattern(
        "milk",
        "whey",
        "casein",
        "egg",
        "honey",
        "gelatin",
        "fish",
        "chicken",
        "beef",
        "pork",
        "dairy",
        "butter",
        "cheese",
        "yogurt",
        "cream",
        "lactose",
    ),
    DietPreference.VEGETARIAN: _pattern(
        "gelatin",
        "fish",
        "chicken",
        "beef",
        "pork",
        "meat",
        "poultry",
        "seafood",
        "anchovy",
    ),
    DietPreference.CARNIVORE: _pattern(
        "oat",
        "wheat",
        "rice",
        "corn",
        "soy",
        "pea",
        "bean",
        "lentil",
        "quinoa",
        "potato",
        "fruit",
        "vegetable",
        "grain",
        "legume",
        "nut",
        "seed",
    ),
    DietPreference.GLUTEN_FREE: _pattern(
        "wheat",
        "barley",
        "rye",
        "malt",
        "spelt",
        "farro",
        "semolina",
        "triticale",
        "gluten",
    ),
}

# Violating one of these forces the personalized score to zero.
IDENTITY_DIETS = frozenset(
    {DietPreference.VEGAN, DietPreference.VEGETARIAN, DietPreference.CARNIVORE}
)

WHOLE_FOODS_VIOLATION_FLAGS = frozenset(
    {"ultra_processed", "high_risk_additives", "moderate_risk_additives"}
)


def contains_any(text: str, terms: tuple[str, ...]) -> bool:
    """Return True when the lower-cased text contains any of the terms."""
    lowered = text.lower()
    return any(term in lowered for term in terms)


def matches_whole_food(ingredient: str) -> bool:
    """Return True when an ingredient names a whole food."""
    lowered = ingredient.strip().lower()
    if not lowered:
        return False
    return any(food in lowered or lowered in food for food in WHOLE_FOODS)
