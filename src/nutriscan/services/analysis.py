"""Scan analysis service combining base scoring and personalization."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace

from nutriscan.domain.nutrition import IngredientProfile, NutritionFacts
from nutriscan.domain.profile import UserProfile
from nutriscan.domain.scoring import ScanAnalysis
from nutriscan.services.personalization import personalize
from nutriscan.services.scoring import score_base

_logger = logging.getLogger(__name__)

_SCORE_PHRASES = (
    (85, "Legendary pick"),
    (75, "Solid choice"),
    (65, "Pretty good"),
    (50, "Decent pick"),
    (35, "Mediocre pick"),
    (25, "Questionable choice"),
)


def score_phrase(score: float) -> str:
    """Return a short verdict phrase for a score."""
    for threshold, phrase in _SCORE_PHRASES:
        if score >= threshold:
            return phrase
    return "Avoid this one"


@dataclass
class ScanAnalysisService:
    """Service that scores a scanned product and personalizes the result."""

    debug: bool = False

    def analyze(
        self,
        facts: NutritionFacts,
        ingredients: IngredientProfile,
        profile: UserProfile | None = None,
        extra_flags: Iterable[str] = (),
    ) -> ScanAnalysis:
        """Score a product, then personalize it when a profile is given.

        ``extra_flags`` carries product flags from the lookup source, such as
        ``ultra_processed``, which the base scorer cannot derive.
        """
        scoring = score_base(facts, ingredients)
        if self.debug:
            _logger.info(
                "Base score: score=%s grade=%s flags=%s",
                scoring.score,
                scoring.grade.value,
                ",".join(scoring.flags),
            )
        if profile is None:
            return ScanAnalysis(
                scoring=scoring,
                personalization=None,
                verdict=score_phrase(scoring.score),
            )

        personalization = personalize(
            facts, ingredients, scoring.score, profile, extra_flags=extra_flags
        )
        if self.debug:
            _logger.info(
                "Personal score: score=%s adjustment=%s forced_zero=%s",
                personalization.score,
                personalization.adjustment,
                personalization.forced_zero,
            )
        breakdown = replace(
            scoring.breakdown,
            personal_adjustment=personalization.adjustment,
            personal_total=personalization.score,
        )
        return ScanAnalysis(
            scoring=replace(scoring, breakdown=breakdown),
            personalization=personalization,
            verdict=score_phrase(personalization.score),
        )
