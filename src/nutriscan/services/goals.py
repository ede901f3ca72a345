"""Conversion of onboarding goal answers into a user profile."""

from collections.abc import Mapping
from enum import Enum
from typing import TypeVar

from nutriscan.domain.profile import (
    BodyGoal,
    DietPreference,
    HealthFocus,
    LifeGoal,
    Motivation,
    Strictness,
    UserProfile,
)

_E = TypeVar("_E", bound=Enum)

# Onboarding answers that differ from the profile values.
_BODY_GOAL_ALIASES = {
    "lose-weight": BodyGoal.LOSE,
    "slightly-lose-weight": BodyGoal.SLIGHTLY_LOSE,
    "maintain-weight": BodyGoal.MAINTAIN,
    "slightly-gain-weight": BodyGoal.SLIGHTLY_GAIN,
    "gain-weight": BodyGoal.GAIN,
}


def _parse(
    enum_type: type[_E], raw: object, aliases: Mapping[str, _E] | None = None
) -> _E | None:
    """Return the enum member for a raw answer, or None when unrecognized."""
    if isinstance(raw, enum_type):
        return raw
    if not isinstance(raw, str):
        return None
    cleaned = raw.strip().lower().replace("_", "-")
    if aliases and cleaned in aliases:
        return aliases[cleaned]
    try:
        return enum_type(cleaned)
    except ValueError:
        return None


def parse_strictness(raw: object) -> Strictness:
    """Parse a strictness answer, defaulting to neutral."""
    return _parse(Strictness, raw) or Strictness.NEUTRAL


def profile_from_goals(goals: Mapping[str, object] | None) -> UserProfile:
    """Build a profile from onboarding answers.

    Accepts both onboarding identifiers such as ``lose-weight`` and profile
    values such as ``lose``. Unknown or missing answers fall back to the axis
    default.
    """
    if not goals:
        return UserProfile()
    return UserProfile(
        body_goal=(
            _parse(BodyGoal, goals.get("body_goal"), _BODY_GOAL_ALIASES)
            or BodyGoal.MAINTAIN
        ),
        health_focus=(
            _parse(HealthFocus, goals.get("health_goal")) or HealthFocus.BALANCED
        ),
        health_strictness=parse_strictness(goals.get("health_strictness")),
        diet_preference=(
            _parse(DietPreference, goals.get("diet_goal")) or DietPreference.BALANCED
        ),
        diet_strictness=parse_strictness(goals.get("diet_strictness")),
        life_goal=_parse(LifeGoal, goals.get("life_goal")),
        life_strictness=parse_strictness(goals.get("life_strictness")),
        motivation=_parse(Motivation, goals.get("motivation")),
    )
