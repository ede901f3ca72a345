"""Shared test fixtures."""

import pytest

from nutriscan.config import Settings
from nutriscan.containers import AppContainer
from nutriscan.domain.nutrition import IngredientProfile, NutritionFacts
from nutriscan.services.analysis import ScanAnalysisService

PROCESSED_SNACK_INGREDIENTS = (
    "enriched flour",
    "high fructose corn syrup",
    "soybean oil",
    "salt",
    "artificial flavors",
    "preservatives",
    "red dye 40",
    "yellow dye 5",
    "bht",
    "tbhq",
    "sodium benzoate",
    "monosodium glutamate",
    "corn syrup",
)

SNACK_ADDITIVES = (
    "bht",
    "tbhq",
    "sodium benzoate",
    "msg",
    "red dye 40",
    "yellow dye 5",
)


def neutral_facts(**overrides: float) -> NutritionFacts:
    """Facts that trigger no personalization rule unless overridden."""
    values = {
        "calories": 150.0,
        "protein_g": 0.0,
        "carbs_g": 0.0,
        "fat_g": 0.0,
        "saturated_fat_g": 0.0,
        "fiber_g": 0.0,
        "sugar_g": 0.0,
        "sodium_mg": 200.0,
    }
    values.update(overrides)
    return NutritionFacts(**values)


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", log_level="INFO", debug_scoring=True)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return AppContainer(
        settings=settings,
        analysis_service=ScanAnalysisService(debug=settings.debug_scoring),
    )


@pytest.fixture
def organic_apple() -> tuple[NutritionFacts, IngredientProfile]:
    facts = NutritionFacts(
        calories=95,
        protein_g=0.5,
        saturated_fat_g=0.1,
        sodium_mg=2,
        sugar_g=19,
        fiber_g=4.4,
    )
    return facts, IngredientProfile(ingredients=("organic apples",), is_organic=True)


@pytest.fixture
def processed_snack() -> tuple[NutritionFacts, IngredientProfile]:
    facts = NutritionFacts(
        calories=160,
        protein_g=2,
        saturated_fat_g=3,
        sodium_mg=230,
        sugar_g=8,
        fiber_g=0.5,
    )
    ingredients = IngredientProfile(
        ingredients=PROCESSED_SNACK_INGREDIENTS,
        additives=SNACK_ADDITIVES,
    )
    return facts, ingredients


@pytest.fixture
def chicken_breast() -> tuple[NutritionFacts, IngredientProfile]:
    facts = NutritionFacts(
        calories=185,
        protein_g=35,
        saturated_fat_g=1.1,
        sodium_mg=84,
        sugar_g=0,
        fiber_g=0,
    )
    return facts, IngredientProfile(ingredients=("chicken breast",))
