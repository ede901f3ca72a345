"""Rounding and clamped-scaling helpers shared by the scoring rules."""

import math


def clamp(value: float, low: float, high: float) -> float:
    """Clamp a value into [low, high]."""
    return max(low, min(high, value))


def scaled(value: float, maximum: float, *, offset: float = 0.0, span: float) -> float:
    """Scale (value - offset) / span into [0, 1] and multiply by maximum."""
    return clamp((value - offset) / span, 0.0, 1.0) * maximum


def round_whole(value: float) -> int:
    """Round half up toward positive infinity."""
    return math.floor(value + 0.5)


def round_half(value: float) -> float:
    """Round to the nearest 0.5, ties toward positive infinity."""
    return math.floor(value * 2 + 0.5) / 2


def format_amount(value: float) -> str:
    """Format a nutrient amount without a trailing .0."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)
