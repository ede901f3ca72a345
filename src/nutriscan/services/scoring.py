"""Rule-based base health scoring."""

from nutriscan.domain.nutrition import IngredientProfile, NutritionFacts
from nutriscan.domain.rules import (
    ADDED_SUGARS,
    HIGH_RISK_ADDITIVES,
    MODERATE_RISK_ADDITIVES,
    PROCESSED_INGREDIENT_COUNT,
    PROCESSING_INDICATORS,
    SEED_OILS,
    contains_any,
    matches_whole_food,
)
from nutriscan.domain.scoring import Grade, ScoreBreakdown, ScoringResult
from nutriscan.services.scaling import clamp, format_amount, round_half

STARTING_SCORE = 60.0
ORGANIC_BONUS = 10.0
_MODERATE_SUGAR_MAX = (10.5 - 6) * 2.2

_GRADE_THRESHOLDS = (
    (75, Grade.EXCELLENT),
    (50, Grade.GOOD),
    (25, Grade.MEDIOCRE),
)


def base_grade(score: float) -> Grade:
    """Return the grade for a base score."""
    for threshold, grade in _GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return Grade.POOR


def score_base(  # noqa: PLR0912, PLR0915
    facts: NutritionFacts, ingredients: IngredientProfile
) -> ScoringResult:
    """Score a product from its per-serving facts and ingredient profile.

    The nutrition component starts at 60 and moves with each macro and
    ingredient rule; additive penalties and the organic bonus are kept in
    separate components. The total is rounded to the nearest half point and
    clamped to [0, 100].
    """
    nutrition_score = STARTING_SCORE
    reasons: list[str] = []
    flags: list[str] = []

    sugar = facts.sugar_g
    sugar_text = format_amount(sugar)
    if sugar > 10.5:
        # Floored at the moderate tier maximum so more sugar never scores higher.
        nutrition_score -= min(35.0, max((sugar - 10.5) * 3, _MODERATE_SUGAR_MAX))
        reasons.append(
            f"High sugar content ({sugar_text}g per serving) - heavily penalized"
        )
        flags.append("high_sugar")
    elif sugar > 6:
        nutrition_score -= min(10.0, (sugar - 6) * 2.2)
        reasons.append(f"Moderate sugar content ({sugar_text}g per serving)")
        flags.append("moderate_sugar")
    elif sugar > 3:
        nutrition_score += 3
        reasons.append(f"Good sugar level ({sugar_text}g per serving)")
        flags.append("good_sugar")
    else:
        nutrition_score += 8
        reasons.append(f"Excellent low sugar content ({sugar_text}g per serving)")
        flags.append("excellent_sugar")

    if facts.saturated_fat_g >= 5:
        nutrition_score -= min(15.0, (facts.saturated_fat_g - 5) * 3)
        reasons.append(
            f"High saturated fat ({format_amount(facts.saturated_fat_g)}g per serving)"
        )
        flags.append("high_saturated_fat")

    if facts.sodium_mg >= 400:
        nutrition_score -= min(12.0, (facts.sodium_mg - 400) / 50)
        reasons.append(
            f"High sodium content ({format_amount(facts.sodium_mg)}mg per serving)"
        )
        flags.append("high_sodium")
    elif facts.sodium_mg <= 140:
        reasons.append("Low sodium content")

    if facts.calories >= 300:
        nutrition_score -= min(10.0, (facts.calories - 300) / 30)
        reasons.append(
            f"High calorie content ({format_amount(facts.calories)} kcal per serving)"
        )
        flags.append("high_calories")

    if facts.protein_g >= 8:
        nutrition_score += min(20.0, (facts.protein_g - 8) * 2.5)
        reasons.append(
            f"Good protein content ({format_amount(facts.protein_g)}g per serving)"
        )
        flags.append("high_protein")

    if facts.fiber_g >= 4:
        nutrition_score += min(10.0, (facts.fiber_g - 4) * 2.5)
        reasons.append(
            f"High fiber content ({format_amount(facts.fiber_g)}g per serving)"
        )
        flags.append("high_fiber")

    first = ingredients.first_ingredient
    if first is not None and matches_whole_food(first):
        nutrition_score += 6
        reasons.append("First ingredient is a whole food")
        flags.append("whole_food_first")

    if len(ingredients.ingredients) > PROCESSED_INGREDIENT_COUNT and any(
        contains_any(item, PROCESSING_INDICATORS) for item in ingredients.ingredients
    ):
        nutrition_score -= 8
        reasons.append("Highly processed with many ingredients and additives")
        flags.append("highly_processed")

    additives_penalty = 0.0
    high_risk = [
        a for a in ingredients.additives if contains_any(a, HIGH_RISK_ADDITIVES)
    ]
    if high_risk:
        additives_penalty += min(30, len(high_risk) * 15)
        reasons.append(f"Contains {len(high_risk)} high-risk additive(s)")
        flags.append("high_risk_additives")

    moderate_risk = [
        a for a in ingredients.additives if contains_any(a, MODERATE_RISK_ADDITIVES)
    ]
    if moderate_risk:
        additives_penalty += min(24, len(moderate_risk) * 8)
        reasons.append(f"Contains {len(moderate_risk)} moderate-risk additive(s)")
        flags.append("moderate_risk_additives")

    if any(contains_any(item, SEED_OILS) for item in ingredients.ingredients):
        additives_penalty += 5
        reasons.append("Contains seed oils")
        flags.append("seed_oil")

    if any(contains_any(item, ADDED_SUGARS) for item in ingredients.ingredients):
        reasons.append("Contains added sugars")
        flags.append("added_sugar")

    additives_score = 0.0 - additives_penalty

    organic_score = 0.0
    if ingredients.is_organic:
        organic_score = ORGANIC_BONUS
        reasons.append("Certified organic product")
        flags.append("organic")

    raw_score = nutrition_score + additives_score + organic_score
    total_score = clamp(round_half(raw_score), 0, 100)

    return ScoringResult(
        score=total_score,
        grade=base_grade(total_score),
        reasons=tuple(reasons),
        flags=tuple(flags),
        breakdown=ScoreBreakdown(
            nutrition_score=nutrition_score,
            additives_score=additives_score,
            organic_score=organic_score,
            total_score=total_score,
        ),
    )
