"""User goal profile models."""

from dataclasses import dataclass
from enum import Enum


class Strictness(Enum):
    """How strongly a goal axis is weighted."""

    NOT_STRICT = "not-strict"
    NEUTRAL = "neutral"
    VERY_STRICT = "very-strict"

    @property
    def multiplier(self) -> float:
        """Return the delta multiplier for this setting."""
        return _STRICTNESS_MULTIPLIERS[self]


_STRICTNESS_MULTIPLIERS = {
    Strictness.NOT_STRICT: 0.6,
    Strictness.NEUTRAL: 1.0,
    Strictness.VERY_STRICT: 1.4,
}


class BodyGoal(Enum):
    """Weight direction the user is aiming for."""

    LOSE = "lose"
    SLIGHTLY_LOSE = "slightly-lose"
    MAINTAIN = "maintain"
    SLIGHTLY_GAIN = "slightly-gain"
    GAIN = "gain"


class HealthFocus(Enum):
    """Macro-nutrient focus."""

    LOW_SUGAR = "low-sugar"
    HIGH_PROTEIN = "high-protein"
    LOW_FAT = "low-fat"
    KETO = "keto"
    BALANCED = "balanced"


class DietPreference(Enum):
    """Dietary pattern the user follows."""

    WHOLE_FOODS = "whole-foods"
    VEGAN = "vegan"
    CARNIVORE = "carnivore"
    GLUTEN_FREE = "gluten-free"
    VEGETARIAN = "vegetarian"
    BALANCED = "balanced"

    @property
    def label(self) -> str:
        """Human-readable diet name."""
        return self.value.replace("-", " ")


class LifeGoal(Enum):
    """Lifestyle outcome the user cares about."""

    EAT_HEALTHIER = "eat-healthier"
    BOOST_ENERGY = "boost-energy"
    FEEL_BETTER = "feel-better"
    CLEAR_SKIN = "clear-skin"


class Motivation(Enum):
    """Why the user started tracking; informational only."""

    LOOKING_BETTER = "looking-better"
    FEELING_BETTER = "feeling-better"
    MORE_ENERGY = "more-energy"
    LONGEVITY = "longevity"


@dataclass(frozen=True)
class UserProfile:
    """A user's goals, one value per axis."""

    body_goal: BodyGoal = BodyGoal.MAINTAIN
    health_focus: HealthFocus = HealthFocus.BALANCED
    health_strictness: Strictness = Strictness.NEUTRAL
    diet_preference: DietPreference = DietPreference.BALANCED
    diet_strictness: Strictness = Strictness.NEUTRAL
    life_goal: LifeGoal | None = None
    life_strictness: Strictness = Strictness.NEUTRAL
    # Informational; no scoring rule reads it.
    motivation: Motivation | None = None
