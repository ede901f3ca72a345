"""Pydantic models for scoring request payloads."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from nutriscan.domain.nutrition import IngredientProfile, NutritionFacts

StrictnessValue = Literal["not-strict", "neutral", "very-strict"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NutritionPayload(_CamelModel):
    """Per-serving nutrition facts; missing values default to zero."""

    calories: float = Field(default=0.0, ge=0)
    protein: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    fat: float = Field(default=0.0, ge=0)
    saturated_fat: float = Field(default=0.0, ge=0)
    fiber: float = Field(default=0.0, ge=0)
    sugar: float = Field(default=0.0, ge=0)
    sodium: float = Field(default=0.0, ge=0)

    def to_facts(self) -> NutritionFacts:
        """Convert to the domain record."""
        return NutritionFacts(
            calories=self.calories,
            protein_g=self.protein,
            carbs_g=self.carbs,
            fat_g=self.fat,
            saturated_fat_g=self.saturated_fat,
            fiber_g=self.fiber,
            sugar_g=self.sugar,
            sodium_mg=self.sodium,
        )


class UserGoalsPayload(_CamelModel):
    """Onboarding goal answers."""

    body_goal: str | None = None
    health_goal: str | None = None
    diet_goal: str | None = None
    life_goal: str | None = None
    motivation: str | None = None
    health_strictness: StrictnessValue | None = None
    diet_strictness: StrictnessValue | None = None
    life_strictness: StrictnessValue | None = None


class ScoreRequest(_CamelModel):
    """Product data to score."""

    nutrition: NutritionPayload = Field(default_factory=NutritionPayload)
    ingredients: list[str] = Field(default_factory=list)
    additives: list[str] = Field(default_factory=list)
    is_organic: bool = False

    def to_ingredients(self) -> IngredientProfile:
        """Convert to the domain record."""
        return IngredientProfile(
            ingredients=tuple(self.ingredients),
            additives=tuple(self.additives),
            is_organic=self.is_organic,
        )


class PersonalizeRequest(ScoreRequest):
    """Product data, a known base score and the user's goals."""

    base_score: float = Field(ge=0, le=100)
    flags: list[str] = Field(default_factory=list)
    goals: UserGoalsPayload = Field(default_factory=UserGoalsPayload)


class AnalyzeRequest(ScoreRequest):
    """Product data with optional goals for a full scan analysis."""

    flags: list[str] = Field(default_factory=list)
    goals: UserGoalsPayload | None = None
