"""Nutrition domain models."""

import math
from collections.abc import Iterable
from dataclasses import dataclass, fields


class InvalidNutritionFactsError(ValueError):
    """Raised when a nutrition value is negative or not a number."""

    def __init__(self, field_name: str, value: float) -> None:
        super().__init__(f"{field_name} must be a non-negative number, got {value!r}")
        self.field_name = field_name
        self.value = value


@dataclass(frozen=True)
class NutritionFacts:
    """Per-serving nutrition facts for a scanned product."""

    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    saturated_fat_g: float = 0.0
    fiber_g: float = 0.0
    sugar_g: float = 0.0
    sodium_mg: float = 0.0

    def __post_init__(self) -> None:
        for entry in fields(self):
            value = getattr(self, entry.name)
            if math.isnan(value) or value < 0:
                raise InvalidNutritionFactsError(entry.name, value)


@dataclass(frozen=True)
class IngredientProfile:
    """Ingredient list, detected additives and organic certification."""

    ingredients: tuple[str, ...] = ()
    additives: tuple[str, ...] = ()
    is_organic: bool = False

    @property
    def first_ingredient(self) -> str | None:
        """Return the first listed ingredient, if any."""
        return self.ingredients[0] if self.ingredients else None


@dataclass(frozen=True)
class Product:
    """Normalized product shape used for personalization."""

    facts: NutritionFacts
    ingredients_text: str
    additives: tuple[str, ...]
    flags: frozenset[str]
    base_score: float

    @classmethod
    def from_scan(
        cls,
        facts: NutritionFacts,
        ingredients: IngredientProfile,
        base_score: float,
        flags: Iterable[str] = (),
    ) -> "Product":
        """Build a product from scan data and the base scorer's flags."""
        return cls(
            facts=facts,
            ingredients_text=", ".join(ingredients.ingredients).lower(),
            additives=tuple(ingredients.additives),
            flags=frozenset(flags),
            base_score=base_score,
        )

    def has_flag(self, flag: str) -> bool:
        """Return True when the product carries the given flag."""
        return flag in self.flags
