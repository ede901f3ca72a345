"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from nutriscan.api.models import (
    AnalyzeRequest,
    PersonalizeRequest,
    ScoreRequest,
    UserGoalsPayload,
)
from nutriscan.app_logging import configure_logging
from nutriscan.containers import AppContainer
from nutriscan.domain.nutrition import InvalidNutritionFactsError
from nutriscan.domain.profile import UserProfile
from nutriscan.domain.scoring import (
    PersonalizationResult,
    ScanAnalysis,
    ScoreBreakdown,
    ScoringResult,
)
from nutriscan.services.goals import profile_from_goals
from nutriscan.services.personalization import personalize
from nutriscan.services.scoring import score_base


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(InvalidNutritionFactsError)
    async def invalid_facts_handler(
        request: Request, exc: InvalidNutritionFactsError
    ) -> JSONResponse:
        logger.warning("Rejected nutrition facts: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc), "field": exc.field_name},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/score")
    async def score(payload: ScoreRequest) -> dict[str, object]:
        """Return the base health score for a product."""
        result = score_base(payload.nutrition.to_facts(), payload.to_ingredients())
        return _format_scoring(result)

    @app.post("/personalize")
    async def personalize_score(payload: PersonalizeRequest) -> dict[str, object]:
        """Adjust a known base score to the user's goals."""
        result = personalize(
            payload.nutrition.to_facts(),
            payload.to_ingredients(),
            payload.base_score,
            _profile(payload.goals),
            extra_flags=payload.flags,
        )
        return _format_personalization(result)

    @app.post("/analyze")
    async def analyze(payload: AnalyzeRequest, request: Request) -> dict[str, object]:
        """Score a product and personalize it when goals are supplied."""
        state_container: AppContainer = request.app.state.container
        profile = _profile(payload.goals) if payload.goals is not None else None
        analysis = state_container.analysis_service.analyze(
            payload.nutrition.to_facts(),
            payload.to_ingredients(),
            profile=profile,
            extra_flags=payload.flags,
        )
        return _format_analysis(analysis)

    return app


def _profile(goals: UserGoalsPayload) -> UserProfile:
    return profile_from_goals(goals.model_dump())


def _format_breakdown(breakdown: ScoreBreakdown) -> dict[str, object]:
    payload: dict[str, object] = {
        "nutrition_score": breakdown.nutrition_score,
        "additives_score": breakdown.additives_score,
        "organic_score": breakdown.organic_score,
        "total_score": breakdown.total_score,
    }
    if breakdown.personal_total is not None:
        payload["personal_adjustment"] = breakdown.personal_adjustment
        payload["personal_total"] = breakdown.personal_total
    return payload


def _format_scoring(result: ScoringResult) -> dict[str, object]:
    return {
        "score": result.score,
        "grade": result.grade.value,
        "reasons": list(result.reasons),
        "flags": list(result.flags),
        "breakdown": _format_breakdown(result.breakdown),
    }


def _format_personalization(result: PersonalizationResult) -> dict[str, object]:
    return {
        "score": result.score,
        "grade": result.grade.value,
        "reasons": list(result.reasons),
        "adjustment": result.adjustment,
        "forced_zero": result.forced_zero,
    }


def _format_analysis(analysis: ScanAnalysis) -> dict[str, object]:
    personalization = analysis.personalization
    return {
        "scoring": _format_scoring(analysis.scoring),
        "personalization": (
            _format_personalization(personalization)
            if personalization is not None
            else None
        ),
        "verdict": analysis.verdict,
    }
