"""Goal-based personalization of the base health score."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from nutriscan.domain.nutrition import IngredientProfile, NutritionFacts, Product
from nutriscan.domain.profile import (
    BodyGoal,
    DietPreference,
    HealthFocus,
    LifeGoal,
    Strictness,
    UserProfile,
)
from nutriscan.domain.rules import (
    DIET_VIOLATION_PATTERNS,
    IDENTITY_DIETS,
    WHOLE_FOODS_VIOLATION_FLAGS,
)
from nutriscan.domain.scoring import Grade, PersonalizationResult
from nutriscan.services.scaling import (
    clamp,
    format_amount,
    round_half,
    round_whole,
    scaled,
)
from nutriscan.services.scoring import score_base

_PERSONAL_GRADE_THRESHOLDS = (
    (86, Grade.EXCELLENT),
    (66, Grade.GOOD),
    (41, Grade.MEDIOCRE),
)


@dataclass(frozen=True)
class Delta:
    """Score change contributed by one goal axis."""

    value: int
    reasons: tuple[str, ...] = ()


@dataclass(frozen=True)
class DietAdjustment:
    """Diet preference outcome that adds to the score."""

    delta: int
    reasons: tuple[str, ...] = ()


@dataclass(frozen=True)
class ForceZero:
    """Diet preference outcome that overrides the score with zero."""

    reasons: tuple[str, ...]


DietFit = DietAdjustment | ForceZero


def personal_grade(score: float) -> Grade:
    """Return the grade for a personalized score."""
    for threshold, grade in _PERSONAL_GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return Grade.POOR


def _strictness_reasons(strictness: Strictness, axis: str) -> list[str]:
    if strictness is Strictness.VERY_STRICT:
        return [f"Strict setting amplifies your {axis} impact"]
    if strictness is Strictness.NOT_STRICT:
        return [f"Not too strict setting softens your {axis} impact"]
    return []


# Health focus rules: each returns the raw delta and its reasons.


def _low_sugar(facts: NutritionFacts) -> tuple[float, list[str]]:
    sugar = facts.sugar_g
    amount = format_amount(sugar)
    why: list[str] = []
    if sugar > 10.5:
        delta = -min(45.0, max((sugar - 10.5) * 4, (10.5 - 6) * 4.4))
        why.append(f"High sugar ({amount}g) severely hurts your Low Sugar focus")
    elif sugar > 6:
        delta = -min(20.0, (sugar - 6) * 4.4)
        why.append(f"Moderate sugar ({amount}g) conflicts with your Low Sugar focus")
    elif sugar > 3:
        delta = 5.0
        why.append(f"Good sugar level ({amount}g) supports your Low Sugar focus")
    else:
        delta = 12.0
        why.append(
            f"Excellent low sugar ({amount}g) perfectly aligns with your "
            "Low Sugar focus"
        )
    fiber_bonus = scaled(facts.fiber_g, 6, span=5)
    delta += fiber_bonus
    if fiber_bonus > 3:
        why.append("High fiber helps with sugar management")
    return delta, why


def _high_protein(facts: NutritionFacts) -> tuple[float, list[str]]:
    why: list[str] = []
    protein_bonus = scaled(facts.protein_g, 25, span=25)
    sugar_penalty = scaled(facts.sugar_g, 15, offset=8, span=12)
    if protein_bonus > 5:
        why.append(
            f"High protein ({format_amount(facts.protein_g)}g) strongly supports "
            "your High Protein focus"
        )
    if sugar_penalty > 5:
        why.append(
            f"Sugar ({format_amount(facts.sugar_g)}g) conflicts with your "
            "High Protein focus"
        )
    return protein_bonus - sugar_penalty, why


def _low_fat(facts: NutritionFacts) -> tuple[float, list[str]]:
    why: list[str] = []
    fat_penalty = scaled(facts.fat_g, 20, offset=3, span=12)
    saturated_penalty = scaled(facts.saturated_fat_g, 15, offset=2, span=5)
    fiber_bonus = scaled(facts.fiber_g, 6, span=5)
    protein_bonus = scaled(facts.protein_g, 6, span=20)
    if fat_penalty > 5 or saturated_penalty > 5:
        why.append("High fat content conflicts with your Low Fat focus")
    if fiber_bonus > 3 or protein_bonus > 3:
        why.append("Good fiber and protein support your Low Fat focus")
    return fiber_bonus + protein_bonus - fat_penalty - saturated_penalty, why


def _keto(facts: NutritionFacts) -> tuple[float, list[str]]:
    why: list[str] = []
    carb_penalty = scaled(facts.carbs_g, 35, offset=5, span=20)
    sugar_penalty = scaled(facts.sugar_g, 25, offset=2, span=8)
    protein_bonus = scaled(facts.protein_g, 8, span=20)
    if carb_penalty > 10:
        why.append(
            f"Carbs ({format_amount(facts.carbs_g)}g) are too high for your Keto focus"
        )
    if sugar_penalty > 10:
        why.append(
            f"Sugar ({format_amount(facts.sugar_g)}g) is incompatible with your "
            "Keto focus"
        )
    return protein_bonus - carb_penalty - sugar_penalty, why


def _balanced(facts: NutritionFacts) -> tuple[float, list[str]]:
    why: list[str] = []
    fiber_bonus = scaled(facts.fiber_g, 8, span=6)
    protein_bonus = scaled(facts.protein_g, 6, span=20)
    sugar_penalty = scaled(facts.sugar_g, 12, offset=10, span=15)
    saturated_penalty = scaled(facts.saturated_fat_g, 8, offset=4, span=6)
    if sugar_penalty > 5:
        why.append(
            f"Sugar ({format_amount(facts.sugar_g)}g) is high for balanced nutrition"
        )
    return fiber_bonus + protein_bonus - sugar_penalty - saturated_penalty, why


_HealthRule = Callable[[NutritionFacts], tuple[float, list[str]]]

_HEALTH_RULES: dict[HealthFocus, _HealthRule] = {
    HealthFocus.LOW_SUGAR: _low_sugar,
    HealthFocus.HIGH_PROTEIN: _high_protein,
    HealthFocus.LOW_FAT: _low_fat,
    HealthFocus.KETO: _keto,
    HealthFocus.BALANCED: _balanced,
}


def delta_health(
    product: Product,
    focus: HealthFocus,
    strictness: Strictness = Strictness.NEUTRAL,
) -> Delta:
    """Score change for the user's health focus."""
    rule = _HEALTH_RULES.get(focus, _balanced)
    raw, why = rule(product.facts)
    why.extend(_strictness_reasons(strictness, "Health Focus"))
    return Delta(round_whole(raw * strictness.multiplier), tuple(why))


def fits_diet(
    product: Product,
    diet: DietPreference,
    strictness: Strictness = Strictness.NEUTRAL,
) -> DietFit:
    """Check a product against a diet preference.

    Violating vegan, vegetarian or carnivore forces the personalized score
    to zero unless the user chose the not-strict setting.
    """
    multiplier = strictness.multiplier
    disclosure = _strictness_reasons(strictness, "Diet Preference")

    if diet is DietPreference.WHOLE_FOODS:
        violates = bool(product.flags & WHOLE_FOODS_VIOLATION_FLAGS)
    else:
        pattern = DIET_VIOLATION_PATTERNS.get(diet)
        violates = bool(pattern and pattern.search(product.ingredients_text))

    if violates:
        if diet in IDENTITY_DIETS:
            if strictness is Strictness.NOT_STRICT:
                return DietAdjustment(
                    round_whole(-60 * multiplier),
                    (f"Conflicts with your {diet.label} diet", *disclosure),
                )
            return ForceZero(
                (
                    f"This product violates your {diet.label} dietary restriction",
                    *disclosure,
                )
            )
        return DietAdjustment(
            round_whole(-40 * multiplier),
            (f"Conflicts with your {diet.label} preference", *disclosure),
        )

    why: list[str] = []
    bonus = 0
    if (
        diet is DietPreference.WHOLE_FOODS
        and not product.has_flag("ultra_processed")
        and not product.has_flag("high_risk_additives")
    ):
        bonus = round_whole(10 * multiplier)
        why.append("Excellent whole-foods choice")
    why.extend(disclosure)
    return DietAdjustment(bonus, tuple(why))


def delta_body(product: Product, body: BodyGoal) -> Delta:  # noqa: PLR0912
    """Score change for the user's body goal; always applied at full weight."""
    facts = product.facts
    calories = facts.calories
    kcal = format_amount(calories)
    sugar = format_amount(facts.sugar_g)
    delta = 0.0
    why: list[str] = []

    if body is BodyGoal.LOSE:
        if calories > 400:
            delta -= 20
            why.append(f"Very high calories ({kcal}) conflict with weight loss goal")
        elif calories > 250:
            delta -= 10
            why.append(f"High calories ({kcal}) may hinder weight loss")
        else:
            delta += 8
            why.append("Good calorie level for weight loss")
        delta += scaled(facts.protein_g, 8, span=20)
        delta += scaled(facts.fiber_g, 8, span=6)
        if facts.sugar_g > 8:
            delta -= scaled(facts.sugar_g, 15, offset=8, span=10)
            why.append(f"Sugar ({sugar}g) conflicts with weight loss")
    elif body is BodyGoal.SLIGHTLY_LOSE:
        if calories > 350:
            delta -= 12
            why.append(f"High calories ({kcal}) may slow gradual weight loss")
        elif calories > 200:
            delta -= 5
            why.append(f"Moderate calories ({kcal}) for gradual weight loss")
        else:
            delta += 5
            why.append("Good calorie level for gradual weight loss")
        delta += scaled(facts.protein_g, 5, span=20)
        delta += scaled(facts.fiber_g, 5, span=6)
        if facts.sugar_g > 10:
            delta -= scaled(facts.sugar_g, 10, offset=10, span=12)
            why.append(f"Sugar ({sugar}g) may hinder gradual weight loss")
    elif body is BodyGoal.GAIN:
        delta += scaled(facts.protein_g, 10, span=25)
        delta += scaled(calories, 8, offset=200, span=300)
        if facts.protein_g >= 20:
            why.append("High protein supports weight gain goals")
    elif body is BodyGoal.SLIGHTLY_GAIN:
        delta += scaled(facts.protein_g, 6, span=25)
        delta += scaled(calories, 5, offset=150, span=250)
        if facts.protein_g >= 15:
            why.append("Good protein supports gradual weight gain goals")
        if calories > 450:
            delta -= 5
            why.append("Very high calories may lead to excessive weight gain")
    else:
        delta += scaled(facts.fiber_g, 4, span=6)
        if calories > 500:
            delta -= 8
            why.append("Very high calories even for maintenance")

    return Delta(round_whole(delta), tuple(why))


def delta_life(  # noqa: PLR0912
    product: Product,
    life: LifeGoal | None,
    strictness: Strictness = Strictness.NEUTRAL,
) -> Delta:
    """Score change for the user's life goal."""
    if life is None:
        return Delta(0)

    facts = product.facts
    sugar = format_amount(facts.sugar_g)
    additive_count = len(product.additives)
    delta = 0.0
    why: list[str] = []

    if life is LifeGoal.BOOST_ENERGY:
        delta += scaled(facts.protein_g, 6, span=20)
        delta += scaled(facts.fiber_g, 6, span=6)
        if facts.sugar_g > 8:
            delta -= scaled(facts.sugar_g, 15, offset=8, span=12)
            why.append(f"Sugar ({sugar}g) can cause energy crashes")
        if additive_count > 3:
            delta -= 8
            why.append("Many additives may affect energy and mood")
        if facts.sugar_g > 10:
            delta -= 12
            why.append("High sugar can cause energy crashes")
    elif life is LifeGoal.CLEAR_SKIN:
        if product.has_flag("ultra_processed"):
            delta -= 12
            why.append("Ultra-processed foods may worsen skin health")
        if product.has_flag("high_risk_additives"):
            delta -= 10
            why.append("High-risk additives may negatively impact skin")
        if facts.sugar_g > 6:
            delta -= scaled(facts.sugar_g, 12, offset=6, span=10)
            why.append(f"Sugar ({sugar}g) may contribute to skin issues")
    elif life is LifeGoal.EAT_HEALTHIER:
        if product.has_flag("high_risk_additives"):
            delta -= 15
            why.append("High-risk additives conflict with health goals")
        if additive_count > 5:
            delta -= 8
            why.append("Many additives may impact overall health")
        if additive_count > 2:
            delta -= additive_count * 2
            why.append("Additives may conflict with health goals")
        if product.has_flag("ultra_processed"):
            delta -= 8
            why.append("Ultra-processed foods may impact overall health")
    elif life is LifeGoal.FEEL_BETTER:
        if facts.sugar_g > 10:
            delta -= 10
            why.append("High sugar may impact body composition goals")
        if facts.protein_g >= 15:
            delta += 6 + 4
            why.append("Good protein supports body confidence goals")

    why.extend(_strictness_reasons(strictness, "Life Goal"))
    return Delta(round_whole(delta * strictness.multiplier), tuple(why))


def personalize(
    facts: NutritionFacts,
    ingredients: IngredientProfile,
    base_score: float,
    profile: UserProfile,
    extra_flags: Iterable[str] = (),
) -> PersonalizationResult:
    """Adjust a base score to a user's goals.

    Flag-based rules see the base scorer's flags for the same facts and
    ingredients, plus ``extra_flags`` from the lookup source such as
    ``ultra_processed``.
    """
    flags = {*score_base(facts, ingredients).flags, *extra_flags}
    product = Product.from_scan(facts, ingredients, base_score, flags)

    health = delta_health(product, profile.health_focus, profile.health_strictness)
    diet = fits_diet(product, profile.diet_preference, profile.diet_strictness)
    body = delta_body(product, profile.body_goal)
    life = delta_life(product, profile.life_goal, profile.life_strictness)

    forced_zero = isinstance(diet, ForceZero)
    diet_delta = 0 if isinstance(diet, ForceZero) else diet.delta
    total = base_score + health.value + diet_delta + body.value + life.value
    score = 0.0 if forced_zero else clamp(round_half(total), 0, 100)

    reasons = [*health.reasons, *diet.reasons, *body.reasons, *life.reasons]
    if profile.health_focus is HealthFocus.HIGH_PROTEIN:
        reasons.insert(0, f"Protein {format_amount(facts.protein_g)}g/serving")
    if (
        profile.health_focus is HealthFocus.LOW_SUGAR
        or profile.life_goal is LifeGoal.CLEAR_SKIN
    ):
        reasons.insert(0, f"Sugar {format_amount(facts.sugar_g)}g/serving")

    return PersonalizationResult(
        score=score,
        grade=personal_grade(score),
        reasons=tuple(reason for reason in reasons if reason),
        adjustment=-base_score if forced_zero else score - base_score,
        forced_zero=forced_zero,
    )
