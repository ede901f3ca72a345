"""Scoring result models."""

from dataclasses import dataclass
from enum import Enum


class Grade(Enum):
    """Coarse quality grade derived from a score."""

    POOR = "poor"
    MEDIOCRE = "mediocre"
    GOOD = "good"
    EXCELLENT = "excellent"


@dataclass(frozen=True)
class ScoreBreakdown:
    """Contribution of each scoring component."""

    nutrition_score: float
    additives_score: float
    organic_score: float
    total_score: float
    personal_adjustment: float | None = None
    personal_total: float | None = None


@dataclass(frozen=True)
class ScoringResult:
    """Base health score for a product."""

    score: float
    grade: Grade
    reasons: tuple[str, ...]
    flags: tuple[str, ...]
    breakdown: ScoreBreakdown


@dataclass(frozen=True)
class PersonalizationResult:
    """Base score adjusted to a user's goals."""

    score: float
    grade: Grade
    reasons: tuple[str, ...]
    adjustment: float
    forced_zero: bool = False


@dataclass(frozen=True)
class ScanAnalysis:
    """Combined base and personalized scoring for a single scan."""

    scoring: ScoringResult
    personalization: PersonalizationResult | None
    verdict: str

    @property
    def headline_score(self) -> float:
        """Score shown to the user: personalized when available."""
        if self.personalization is not None:
            return self.personalization.score
        return self.scoring.score
